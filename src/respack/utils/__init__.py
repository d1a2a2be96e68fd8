from .paths import safe_file_path, validate_entry_path

__all__ = ["safe_file_path", "validate_entry_path"]
