import os
import logging
from flask import Flask, render_template, request, g
from werkzeug.exceptions import InternalServerError
from dotenv import load_dotenv

# Load .env before reading any settings
load_dotenv()

# Set up logging with timestamps
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=[
        logging.FileHandler(os.environ.get("LOG_FILE", "server.log")),
        logging.StreamHandler()
    ]
)

from core.state_manager import GameStateStore, StoreUnavailable, RECENT_LOG_LIMIT
from command_syntax import command_hints
from game_engine import handle_command, load_game_state


def resolve_database_path(environ=os.environ) -> str:
    """DATABASE_PATH wins, then a file under PERSISTENT_DISK_PATH, then ./adventure.db."""
    if environ.get("DATABASE_PATH"):
        return environ["DATABASE_PATH"]
    persistent_disk_path = environ.get("PERSISTENT_DISK_PATH")
    if persistent_disk_path:
        os.makedirs(persistent_disk_path, exist_ok=True)
        return os.path.join(persistent_disk_path, "adventure.db")
    return "adventure.db"


def read_log_limit(value) -> int:
    """Parse RECENT_LOG_LIMIT, keeping the default when it isn't a positive number."""
    if value is None or value == "":
        return RECENT_LOG_LIMIT
    try:
        limit = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid RECENT_LOG_LIMIT {value!r}, using {RECENT_LOG_LIMIT}")
        return RECENT_LOG_LIMIT
    if limit < 1:
        logger.warning(f"RECENT_LOG_LIMIT must be positive, got {limit}, using {RECENT_LOG_LIMIT}")
        return RECENT_LOG_LIMIT
    return limit


app = Flask(__name__)

# Use an environment variable if available (better for real deployments)
app.config["SECRET_KEY"] = os.environ.get("FLASK_SECRET_KEY", "dev-secret-change-me")
app.config["RECENT_LOG_LIMIT"] = read_log_limit(os.environ.get("RECENT_LOG_LIMIT"))

# Database setup
app.config["DATABASE"] = resolve_database_path()


def get_store() -> GameStateStore:
    """Get the store for this request, opening it on first use."""
    if "store" not in g:
        try:
            g.store = GameStateStore.open(app.config["DATABASE"])
        except StoreUnavailable as e:
            raise InternalServerError(description="Database connection failed.") from e
    return g.store


@app.teardown_appcontext
def close_store(exc):
    store = g.pop("store", None)
    if store is not None:
        store.close()


@app.errorhandler(InternalServerError)
def handle_server_error(e):
    logger.error(f"Request failed: {e.original_exception or e.__cause__ or e.description}")
    return render_template("error.html", description=e.description), 500


# --- Routes ---

@app.route("/", methods=["GET", "POST"])
def index():
    store = get_store()

    raw_command = ""
    message = ""
    won = False
    if request.method == "POST":
        raw_command = request.form.get("command", "")
        result = handle_command(raw_command, store)
        message = result.message
        won = result.won

    state = load_game_state(store, log_limit=app.config["RECENT_LOG_LIMIT"])
    return render_template(
        "index.html",
        state=state,
        message=message,
        won=won,
        raw_command=raw_command,
        hints=command_hints(),
    )


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG") == "1")
