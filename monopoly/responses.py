from typing import Any

from fastapi import Response


def data_or_404(data: Any) -> Any:
    """Return ``data`` as the response body, or an empty 404 when it is None.

    Used wherever a lookup, update or delete targets a single id that may not exist.
    """
    if data is None:
        return Response(status_code=404)
    return data
