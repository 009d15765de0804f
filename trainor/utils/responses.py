from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from trainor.services.result import NOT_AUTHENTICATED, Result, describe_error


def envelope(result: Result) -> dict:
    body: dict = {"success": result.success}
    if result.data is not None:
        body["data"] = jsonable_encoder(result.data)
    if not result.success:
        body["error"] = describe_error(result.error)
    return body


def envelope_response(result: Result, *, failure_status: int = 500) -> JSONResponse:
    """
    Turn a service Result into JSON. A not-authenticated failure is always 401.
    """
    if result.success:
        status_code = 200
    elif result.error == NOT_AUTHENTICATED:
        status_code = 401
    else:
        status_code = failure_status
    return JSONResponse(envelope(result), status_code=status_code)
