"""
Configuration management for the element interactivity classifier.
Centralizes all configuration values and eliminates hardcoded constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Config:
    """Application configuration class."""

    # File Paths
    BASE_DIR = Path(__file__).parent
    TAXONOMY_DIR = BASE_DIR / 'taxonomy'
    DEFAULT_TAXONOMY_DATA_DIR = TAXONOMY_DIR / 'data'

    # Taxonomy Configuration
    TAXONOMY_DATA_DIR = Path(os.getenv('TAXONOMY_DATA_DIR', str(DEFAULT_TAXONOMY_DATA_DIR)))
    ROLES_FILE = 'roles.yaml'
    ELEMENT_ROLES_FILE = 'element_roles.yaml'
    DOM_FILE = 'dom.yaml'
    AXOBJECTS_FILE = 'axobjects.yaml'
    ELEMENT_AXOBJECTS_FILE = 'element_axobjects.yaml'

    # HTML Parsing Configuration
    HTML_PARSER = os.getenv('HTML_PARSER', 'html.parser')
    SUPPORTED_HTML_PARSERS = ('html.parser', 'lxml', 'html5lib')

    # Development Configuration
    DEBUG = os.getenv('DEBUG', 'false').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

    @classmethod
    def get_taxonomy_data_dir(cls) -> Path:
        """Get the directory holding the taxonomy YAML files."""
        return cls.TAXONOMY_DATA_DIR

    @classmethod
    def is_verbose(cls) -> bool:
        """Whether informational progress lines should be printed."""
        return cls.DEBUG or cls.LOG_LEVEL.upper() == 'DEBUG'

    @classmethod
    def validate_config(cls):
        """Validate configuration values."""
        errors = []

        if not cls.get_taxonomy_data_dir().is_dir():
            errors.append(f"Taxonomy data directory does not exist: {cls.get_taxonomy_data_dir()}")

        if cls.HTML_PARSER not in cls.SUPPORTED_HTML_PARSERS:
            errors.append(
                f"Unsupported HTML parser '{cls.HTML_PARSER}', "
                f"expected one of: {', '.join(cls.SUPPORTED_HTML_PARSERS)}"
            )

        if cls.LOG_LEVEL.upper() not in cls.LOG_LEVELS:
            errors.append(f"Unknown log level: {cls.LOG_LEVEL}")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")

        return True


# Create global config instance
config = Config()

# Validate configuration on import
if __name__ != '__main__':
    config.validate_config()
