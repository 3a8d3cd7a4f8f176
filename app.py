from flask import Flask, request, session, jsonify, g
import os
import logging
from dotenv import load_dotenv
from ingestion.errors import (
    ChannelError,
    ConfigurationError,
    IngestionError,
    NoDataError,
    OperationInProgressError,
    RemoteError,
)
from ingestion.preview import dataset_stats, search_records
from ingestion.remote import RemoteConfig
from ingestion.service import ANALYSIS_OPERATION, SessionStore
from ingestion.utils import read_upload_text
from analysis.service import analyze_data

# Load environment variables from a local .env file if present (development convenience)
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.getenv("SECRET_KEY", "secret123")
app.config["MAX_CONTENT_LENGTH"] = int(os.getenv("MAX_UPLOAD_MB", "5")) * 1024 * 1024
# Optional injected analysis client (tests); None means build one from the environment
app.config["ANALYSIS_CLIENT"] = None

# Datasets live in process memory only; the cookie just carries the session id
sessions = SessionStore()

OPERATIONAL_ERROR = "Operational error during inference. Please check connection and retry."

ERROR_STATUS = {
    ConfigurationError: 400,
    ChannelError: 400,
    OperationInProgressError: 409,
    NoDataError: 422,
    RemoteError: 502,
}


def current_session():
    data_session = sessions.get(session.get("sid"))
    if data_session is None:
        sid, data_session = sessions.create()
        session["sid"] = sid
    return data_session


@app.before_request
def attach_session():
    g.data = current_session()


def error_response(e: IngestionError):
    return jsonify({"error": str(e)}), ERROR_STATUS.get(type(e), 400)


@app.route("/api/session")
def session_state():
    return jsonify(g.data.to_dict())


@app.route("/api/source/<channel>", methods=["POST"])
def select_source(channel):
    try:
        g.data.select_channel(channel)
    except ChannelError as e:
        return error_response(e)
    return jsonify({"active_channel": g.data.active_channel})


# -------------------------
# CSV channel
# -------------------------

@app.route("/ingest/csv", methods=["POST"])
def ingest_csv():
    file = request.files.get("file")
    if not file:
        return jsonify({"error": "CSV file is required with form field 'file'"}), 400
    try:
        # Zero usable rows comes back as 0 and leaves the current dataset active
        count = g.data.import_csv_text(read_upload_text(file), file.filename or "upload.csv")
    except IngestionError as e:
        return error_response(e)
    return jsonify({"imported": count, "active_channel": g.data.active_channel}), 200


@app.route("/ingest/csv/demo", methods=["POST"])
def ingest_csv_demo():
    try:
        count = g.data.load_demo_csv()
    except IngestionError as e:
        return error_response(e)
    return jsonify({"imported": count, "active_channel": g.data.active_channel}), 200


# -------------------------
# Remote (API) channel
# -------------------------

@app.route("/ingest/remote", methods=["POST"])
def ingest_remote():
    payload = request.get_json(silent=True) or {}
    config = RemoteConfig.from_dict(payload)
    if g.data.is_current_remote(config):
        return jsonify({"error": f"Already connected to {config.url}"}), 409
    try:
        count = g.data.connect_remote(config)
    except IngestionError as e:
        logger.warning("Integration failed: %s", e)
        return jsonify({"error": f"Integration failed: {e}"}), ERROR_STATUS.get(type(e), 400)
    return jsonify({"imported": count, "active_channel": g.data.active_channel}), 200


@app.route("/ingest/remote/demo", methods=["POST"])
def ingest_remote_demo():
    payload = request.get_json(silent=True) or {}
    config = RemoteConfig.from_dict(payload) if payload else None
    try:
        count = g.data.connect_demo_remote(config)
    except IngestionError as e:
        return error_response(e)
    return jsonify({"imported": count, "active_channel": g.data.active_channel}), 200


# -------------------------
# Preview + chat
# -------------------------

@app.route("/api/preview")
def preview():
    records = g.data.active_records
    matches = search_records(records, request.args.get("search", ""))
    return jsonify({
        "active_channel": g.data.active_channel,
        "total": len(records),
        "matches": len(matches),
        "records": matches,
        "stats": dataset_stats(records),
    })


@app.route("/api/chat", methods=["POST"])
def chat():
    payload = request.get_json(silent=True) or {}
    message = (payload.get("message") or "").strip()
    if not message:
        return jsonify({"error": "Message is required"}), 400
    try:
        with g.data.operation(ANALYSIS_OPERATION):
            g.data.add_message("user", message)
            try:
                result = analyze_data(message, g.data.active_records, client=app.config.get("ANALYSIS_CLIENT"))
                reply = g.data.add_message("assistant", result["answer"], analysis=result)
            except Exception as e:
                logger.exception("Chat analysis failed: %s", e)
                reply = g.data.add_message("assistant", OPERATIONAL_ERROR)
    except OperationInProgressError as e:
        return error_response(e)
    return jsonify(reply), 200


if __name__ == "__main__":
    app.run(debug=True)
