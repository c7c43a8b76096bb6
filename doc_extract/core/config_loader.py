import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from doc_extract.core.config_validator import ConfigValidator

logger = logging.getLogger(__name__)

DEFAULT_LIMITS = {
    "max_file_size_mb": 10,
    "min_words": 100,
    "max_words": 50000,
}

def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads configuration from YAML files and environment variables.
    An explicit `config_file` takes precedence over every environment override.
    Returns a dictionary with configuration and status metadata.
    """
    config_status = {
        "status": "OK",
        "error": None,
        "env": get_env(),
        "config_path": None,
        "source": None,
        "data": {}
    }

    env_override_file = os.environ.get("DOC_EXTRACT_CONFIG_FILE")
    env_override_dir = os.environ.get("DOC_EXTRACT_CONFIG_DIR")
    env = config_status["env"]

    # --- 1. Determine Config Directory and Files ---
    if config_file:
        config_path = Path(config_file)
        config_dir = config_path.parent
        files_to_load = [config_path]
        config_status["config_path"] = str(config_path)
        config_status["source"] = "ARGUMENT"
    elif env_override_file:
        config_path = Path(env_override_file)
        config_dir = config_path.parent
        files_to_load = [config_path]
        config_status["config_path"] = str(config_path)
        config_status["source"] = "ENV_FILE (DOC_EXTRACT_CONFIG_FILE)"
    elif env_override_dir:
        config_dir = Path(env_override_dir)
        files_to_load = [
            config_dir / "general.yaml",
            config_dir / f"{env.lower()}.yaml"
        ]
        config_status["source"] = "ENV_DIR (DOC_EXTRACT_CONFIG_DIR)"
    else:
        project_root = Path(__file__).parent.parent.parent
        config_dir = project_root / "config"
        files_to_load = [
            config_dir / "general.yaml",
            config_dir / f"{env.lower()}.yaml"
        ]
        config_status["source"] = "DEFAULT (repo)"

    # --- 2. Load Configs ---
    loaded_config = {}
    files_found = 0

    try:
        for file_path in files_to_load:
            if file_path.exists():
                files_found += 1
                if not (config_file or env_override_file):
                    config_status["config_path"] = str(file_path)

                with open(file_path, "r", encoding="utf-8") as f:
                    loaded_config.update(yaml.safe_load(f) or {})

        if files_found == 0:
            config_status["status"] = "ERROR"
            config_status["error"] = f"No config files found in {config_dir} (tried: {[str(f) for f in files_to_load]})"
            return config_status

        # --- 3. Validation ---
        validation_errors = ConfigValidator.validate(loaded_config)
        if validation_errors:
            config_status["status"] = "ERROR"
            config_status["error"] = "Invalid Configuration:\n" + "\n".join(validation_errors)
            # Keep data for debugging the config
            config_status["data"] = loaded_config
            return config_status

        config_status["data"] = loaded_config

        features = loaded_config.get("features", {}).get("extraction", {})
        logger.info(f"Config Loaded: pdf={features.get('pdf', True)}, docx={features.get('docx', True)}")

    except Exception as e:
        config_status["status"] = "ERROR"
        config_status["error"] = str(e)

    return config_status

def get_limits(config: Dict[str, Any]) -> Dict[str, Any]:
    """Upload/content limits with defaults filled in. Accepts the loaded data dict."""
    limits = dict(DEFAULT_LIMITS)
    limits.update((config or {}).get("limits") or {})
    return limits

def get_env() -> str:
    """
    Detects the current environment.
    Checks DOC_EXTRACT_ENV, defaults to DEV.
    """
    return os.environ.get("DOC_EXTRACT_ENV", "DEV").upper()
