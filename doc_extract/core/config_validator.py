from pathlib import Path
from typing import Dict, Any, List
import logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class ConfigValidator:
    """
    Validates configuration structure and types.
    All sections are optional; defaults apply when a key is absent.
    """

    @staticmethod
    def validate(config: Dict[str, Any]) -> List[str]:
        errors = []

        if not isinstance(config, dict):
            return ["Configuration root must be a dictionary"]

        # 1. Features (strict bools)
        features = config.get("features", {})
        if not isinstance(features, dict):
            errors.append("'features' must be a dictionary")
        else:
            extraction = features.get("extraction", {})
            if not isinstance(extraction, dict):
                errors.append("'features.extraction' must be a dictionary")
            else:
                ConfigValidator._check_bool(extraction, "pdf", errors)
                ConfigValidator._check_bool(extraction, "docx", errors)

        # 2. Limits
        limits = config.get("limits", {})
        if not isinstance(limits, dict):
            errors.append("'limits' must be a dictionary")
        else:
            max_mb = limits.get("max_file_size_mb")
            if max_mb is not None and (isinstance(max_mb, bool) or not isinstance(max_mb, (int, float)) or max_mb <= 0):
                errors.append("'limits.max_file_size_mb' must be a positive number")

            for key in ("min_words", "max_words"):
                val = limits.get(key)
                if val is not None and (isinstance(val, bool) or not isinstance(val, int) or val <= 0):
                    errors.append(f"'limits.{key}' must be a positive integer")

            min_words = limits.get("min_words")
            max_words = limits.get("max_words")
            if isinstance(min_words, int) and isinstance(max_words, int) and min_words > max_words:
                errors.append("'limits.min_words' must not exceed 'limits.max_words'")

        # 3. Logging
        log_cfg = config.get("logging", {})
        if not isinstance(log_cfg, dict):
            errors.append("'logging' must be a dictionary")
        elif "level" in log_cfg and str(log_cfg["level"]).upper() not in LOG_LEVELS:
            errors.append(f"'logging.level' must be one of {', '.join(LOG_LEVELS)}")

        # 4. Paths (optional logs_dir, created when missing)
        paths = config.get("paths", {})
        if not isinstance(paths, dict):
            errors.append("'paths' must be a dictionary")
        elif "logs_dir" in paths:
            val = paths["logs_dir"]
            if not isinstance(val, str):
                errors.append("'paths.logs_dir' must be a string")
            else:
                try:
                    Path(val).mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    errors.append(f"Path 'paths.logs_dir' ({val}) is invalid or not creatable: {e}")

        if errors:
            logger.error(f"Config Validation Failed: {errors}")
        else:
            logger.info("Config OK: Features=%s", features)

        return errors

    @staticmethod
    def _check_bool(section: dict, key: str, errors: list):
        if key in section and not isinstance(section[key], bool):
            errors.append(f"Field '{key}' must be boolean, got {type(section[key]).__name__}")
