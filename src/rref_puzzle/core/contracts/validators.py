"""
JSON Schema Contract Validators

Validation of the JSON payloads exchanged with the presentation layer.
Uses the jsonschema library (Draft 2020-12).

Schemas:
- operation_request.json (row operation requested by the player)
- session_snapshot.json (read-only session state for display)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator

from rref_puzzle.core.domain.operations import (
    AddMultiple,
    ScaleRow,
    SwapRows,
    operation_from_dict,
)
from rref_puzzle.core.domain.session_state import SessionSnapshot
from rref_puzzle.core.math.fraction_text import parse_rational

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Reads and meta-validates schema files from one directory.

    Loaded schemas are cached per loader.

    Args:
        schema_dir: Directory of *.json schemas (SCHEMA_DIR if omitted)
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def schema_names(self) -> List[str]:
        """Names of the schemas available in schema_dir."""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Schema name without extension (e.g. 'operation_request')

        Raises:
            FileNotFoundError: no such schema file
            ValueError: file is not a valid Draft 2020-12 schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Checks payloads against one contract schema.

    Args:
        schema_name: Contract to enforce
        loader: Where to read the schema from (bundled schemas if omitted)
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """One "path: message" line per violation, ordered by location ("$" is the root)."""
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [
            f"{'/'.join(map(str, e.absolute_path)) or '$'}: {e.message}" for e in errors
        ]


class OperationRequestValidator(ContractValidator):
    """operation_request contract."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("operation_request", loader)


class SessionSnapshotValidator(ContractValidator):
    """session_snapshot contract."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("session_snapshot", loader)


@lru_cache(maxsize=None)
def _default_loader() -> SchemaLoader:
    return SchemaLoader()


@lru_cache(maxsize=None)
def _operation_request_validator() -> OperationRequestValidator:
    return OperationRequestValidator()


@lru_cache(maxsize=None)
def _session_snapshot_validator() -> SessionSnapshotValidator:
    return SessionSnapshotValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_operation_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: data does not match operation_request
    """
    _operation_request_validator().validate(data)


def validate_session_snapshot(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: data does not match session_snapshot
    """
    _session_snapshot_validator().validate(data)


def operation_from_request(
    data: Dict[str, Any],
) -> Union[SwapRows, ScaleRow, AddMultiple]:
    """
    Turn an operation request into an Operation model.

    The factor text is parsed before model construction so that a typo by
    the player surfaces as ParseError rather than a model validation error.

    Raises:
        jsonschema.ValidationError: payload does not match the contract
        ParseError: factor text is malformed or divides by zero
    """
    validate_operation_request(data)

    payload = dict(data)
    if isinstance(payload.get("factor"), str):
        payload["factor"] = parse_rational(payload["factor"])

    return operation_from_dict(payload)


def snapshot_to_contract(snapshot: SessionSnapshot) -> Dict[str, Any]:
    """
    Export a snapshot and check it against the session_snapshot contract.

    Raises:
        jsonschema.ValidationError: snapshot does not match the contract
    """
    data = snapshot.to_contract()
    validate_session_snapshot(data)
    return data
