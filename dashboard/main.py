"""
/**
 * @file dashboard/main.py
 * @description FastAPI application entry (wires routers, middleware and the config watcher).
 */
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from dashboard.config import load_settings, reload_settings, CONFIG_PATH, CONFIG_LOCAL_PATH

from dashboard.controllers import dashboard_router, health_router, prepare_router, translate_router, translator_router

app = FastAPI(title="WM Tools")
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("dashboard")


class ConfigEventHandler(FileSystemEventHandler):
    """Handler for config file changes"""
    def on_modified(self, event):
        if event.is_directory:
            return

        if event.src_path in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            # reload_settings keeps the previous settings when the file is broken
            reload_settings()


_observer = None


@app.on_event("startup")
async def startup_event():
    global _observer
    load_settings()
    try:
        event_handler = ConfigEventHandler()
        _observer = Observer()
        config_dir = os.path.dirname(CONFIG_PATH)
        _observer.schedule(event_handler, config_dir, recursive=False)
        _observer.start()
        logger.info(f"Config watcher started on {config_dir}")
    except Exception as e:
        logger.error(f"Failed to start config watcher: {e}")
        _observer = None


@app.on_event("shutdown")
async def shutdown_event():
    global _observer

    if _observer:
        _observer.stop()
        _observer.join()
        _observer = None


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dashboard_router)
app.include_router(translator_router)
app.include_router(prepare_router)
app.include_router(translate_router)
app.include_router(health_router)


def run():
    import uvicorn

    host = os.environ.get("APP_HOST", "0.0.0.0")
    port = int(os.environ.get("APP_PORT", "8000"))
    uvicorn.run("dashboard.main:app", host=host, port=port)


if __name__ == "__main__":
    run()
