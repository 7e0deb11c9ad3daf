import uuid
from flask import request, g

REQUEST_ID_HEADER = "X-Request-ID"


def request_context_middleware(app):
    @app.before_request
    def assign_request_id():
        # Reuse the caller's id when it sends one so logs correlate across hops
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

    @app.after_request
    def echo_request_id(response):
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response
