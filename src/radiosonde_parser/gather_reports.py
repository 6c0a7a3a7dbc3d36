"""
Reads TEMP report text from a local file or a web URL.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
import logging
import os
from urllib.parse import urlparse

import requests
__version__ = '1.0'

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ('http', 'https', 'ftp', 'ftps')


def read_sounding_message(path, timeout=30):
    """
    Reads content from a given path, which can be either a local file path
    or a web URL.

    Args:
        path (str): The path to the file or URL to read.
        timeout (float): Seconds to wait for a remote server.

    Returns:
        tuple: content and filename

    Raises:
        FileNotFoundError: If the local file does not exist.
        requests.exceptions.RequestException: If there's an error fetching content from the URL.
        ValueError: If the path is invalid or cannot be processed.
    """
    try:
        parsed_url = urlparse(path)
        if parsed_url.scheme in REMOTE_SCHEMES:
            logger.info("Reading content from URL: %s", path)
            response = requests.get(path, timeout=timeout)
            response.raise_for_status()  # 4xx / 5xx
            return response.text, os.path.basename(parsed_url.path)

        logger.info("Reading content from local file: %s", path)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Local file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            return f.read(), os.path.basename(path)
    except FileNotFoundError:
        raise
    except requests.exceptions.RequestException as e:
        logger.error("Error fetching content from URL %s: %s", path, e)
        raise
    except (OSError, UnicodeDecodeError, TypeError) as e:
        raise ValueError(f"Could not process path '{path}': {e}") from e
