from typing import Dict, Any, Type, TypeVar, Union
from pathlib import Path
import json
import logging

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

def _encode_model(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

def get_json(obj: Any) -> str:
    """
    Serialize an object to compact JSON text.

    Args:
        obj: Any JSON-serializable value; pydantic models may appear at any depth

    Returns:
        JSON text without whitespace between tokens, e.g. '{"width":10,"height":20}'

    Raises:
        ParseError: If the object cannot be serialized
    """
    try:
        return json.dumps(obj, separators=(",", ":"), default=_encode_model)
    except (TypeError, ValueError) as e:
        logger.debug(f"Serialization failed: {str(e)}")
        raise ParseError(f"Object is not JSON serializable: {str(e)}")

def from_json(model: Type[ModelT], json_string: Union[str, bytes]) -> ModelT:
    """
    Build an instance of ``model`` from JSON text.

    The returned object has the model's methods and the data from the text.

    Raises:
        ParseError: If the text is not valid JSON or does not fit the model
    """
    try:
        return model.model_validate_json(json_string)
    except PydanticValidationError as e:
        logger.debug(f"Deserialization into {model.__name__} failed: {str(e)}")
        raise ParseError(f"Invalid {model.__name__} data: {str(e)}")

def load_json_data(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load JSON data from a file safely.

    Args:
        file_path: Path to the JSON file

    Returns:
        Dict containing the JSON data

    Raises:
        ValidationError: If file cannot be read or JSON is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON format: {str(e)}")
    except OSError as e:
        raise ValidationError(f"Error reading file: {str(e)}")

def from_json_file(model: Type[ModelT], file_path: Union[str, Path]) -> ModelT:
    """Build an instance of ``model`` from a JSON file."""
    data = load_json_data(file_path)
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid {model.__name__} data in {file_path}: {str(e)}")
