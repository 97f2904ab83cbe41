import logging
import os
import secrets

from flask import Flask, jsonify, request
from pydantic import ValidationError

from checker.comparator import compare_detailed
from checker.config import CHECKER_TOKEN, get_default_eps, setup_logging
from checker.exception import ProtocolError
from checker.meta import CheckerInput, CheckRequest, validate_eps
from checker.result_factory import from_comparison

setup_logging()
app = Flask(__name__)
if __name__ != "__main__":
    # let flask app use gunicorn's logger
    gunicorn_logger = logging.getLogger("gunicorn.error")
    if gunicorn_logger.handlers:
        app.logger.handlers = gunicorn_logger.handlers
        app.logger.setLevel(gunicorn_logger.level)
        logging.getLogger().setLevel(gunicorn_logger.level)

    # Allow overriding log level via environment variable
    if os.getenv("CHECKER_DEBUG", "").lower() == "true":
        app.logger.setLevel(logging.DEBUG)
        logging.getLogger().setLevel(logging.DEBUG)
logger = app.logger


def _err(msg: str, code: int):
    return jsonify({
        "status": "err",
        "msg": msg,
        "data": None,
    }), code


@app.post("/check")
def check():
    payload = request.get_json(silent=True)
    token = request.args.get("token", "")
    if isinstance(payload, dict) and "token" in payload:
        token = payload["token"]
    if not isinstance(token, str) or not secrets.compare_digest(
            token.encode(), CHECKER_TOKEN.encode()):
        logger.debug(f"get invalid token: {token}")
        return "invalid token", 403

    if not isinstance(payload, dict):
        return _err("request body must be a JSON object", 400)
    try:
        req = CheckRequest(**payload)
    except ValidationError as e:
        return _err(str(e), 400)

    try:
        if len(req.params) != 1:
            raise ProtocolError(len(req.params))
        data = CheckerInput(
            candidate=req.candidate,
            reference=req.reference,
            eps=validate_eps(req.params[0]),
        )
    except ProtocolError as e:
        logger.debug(f"protocol error: {e}")
        return _err(str(e), 422)

    comparison = compare_detailed(data.candidate, data.reference, data.eps)
    logger.debug(f"verdict {comparison.verdict.value}")
    return jsonify({
        "status": "ok",
        "msg": "ok",
        "data": from_comparison(comparison),
    })


@app.get("/status")
def status():
    return jsonify({
        "status": "ok",
        "defaultEps": get_default_eps(),
    }), 200


# for local debug
# if __name__ == "__main__":
#     app.run(host="0.0.0.0", port=5000, debug=True)
