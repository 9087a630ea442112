from flask import Flask, make_response, request

from .config import PORT
from .worker import handle_request

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

app = Flask(__name__)

def _greeting():
    body, status, headers = handle_request(request)
    return make_response(body, status, headers)

@app.route("/", defaults={"path": ""}, methods=ALL_METHODS)
@app.route("/<path:path>", methods=ALL_METHODS)
def greet(path):
    return _greeting()

# methods outside the routing table (PROPFIND, CONNECT, ...) get the same answer
@app.errorhandler(405)
def greet_any_method(error):
    return _greeting()

def main():
    """Entry point for the sheetcron-serve script."""
    app.run(host="0.0.0.0", port=PORT)

if __name__ == "__main__":
    main()
