from sharedconf.utils.env import env_str, load_dotenv_files
from sharedconf.utils.json import dump_json_document, load_json_document, load_json_object
from sharedconf.utils.logging import setup_logging

__all__ = [
    "env_str",
    "load_dotenv_files",
    "dump_json_document",
    "load_json_document",
    "load_json_object",
    "setup_logging",
]
