"""Utility functions for loading model documents.

This module provides functions for loading .mdj project files from disk and
URLs with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

MODEL_SUFFIXES = {".mdj", ".json"}


class ModelLoaderError(Exception):
    """Custom exception for model loading errors."""

    pass


def _require_object(data: Any, source: str) -> dict:
    if not isinstance(data, dict):
        logger.error(f"Model document is not a JSON object: {source}")
        raise ModelLoaderError(f"Model document must be a JSON object: {source}")
    return data


def load_model_from_file(file_path: str | Path) -> tuple[str, dict]:
    """Load a model document from a local file.

    Args:
        file_path: Path to the .mdj file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ModelLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load model from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in MODEL_SUFFIXES:
        logger.warning(f"File does not have a model extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise ModelLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise ModelLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Successfully loaded model from {file_path}")
    return str(file_path), _require_object(data, str(file_path))


def load_model_from_url(url: str, timeout: int = 30) -> tuple[str, dict]:
    """Load a model document from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        ModelLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug(f"Attempting to load model from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise ModelLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise ModelLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise ModelLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise ModelLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
        raise ModelLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise ModelLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info(f"Successfully loaded model from {url}")
    return url, _require_object(data, url)


def load_model(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, dict]:
    """Load a model document from either a file or URL.

    Args:
        file_path: Path to local .mdj file (mutually exclusive with url).
        url: URL to fetch the document from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        ModelLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise ModelLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise ModelLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_model_from_file(file_path)
    else:
        return load_model_from_url(url, timeout)
