"""Muscle-group dictionary for exercise imports.

Translates free-text section headers found in exercise tables (e.g. "PEITO")
into canonical muscle groups (e.g. CHEST). The mapping lives in an external
YAML file of flat ``header: GROUP`` pairs and is optional: when it is absent
or broken, exercises are still imported, just without muscle associations.
"""
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

import yaml

from exercise_import_api.models import MuscleGroup

logger = logging.getLogger(__name__)


class MuscleGroupDictionary:
    """Immutable header-token -> canonical muscle group mapping."""

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Optional[Mapping[Any, Any]] = None):
        entries = {}
        for key, value in (mapping or {}).items():
            if key is None or value is None:
                continue
            token = str(key).strip().upper()
            if not token:
                continue
            entries[token] = str(value)
        self._mapping = MappingProxyType(entries)

    @classmethod
    def empty(cls) -> "MuscleGroupDictionary":
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "MuscleGroupDictionary":
        return cls(mapping)

    @classmethod
    def load(cls, source: Optional[Union[str, Path]]) -> "MuscleGroupDictionary":
        """
        Load the dictionary from a YAML file.

        Never raises: a missing path, unreadable file or malformed document
        yields an empty dictionary and a warning.

        Args:
            source: Path to the YAML document

        Returns:
            MuscleGroupDictionary (possibly empty)
        """
        if source is None or not str(source).strip():
            logger.warning(
                "No exercise muscle groups configuration file specified. "
                "Set EXERCISE_MUSCLE_GROUPS_CONFIG_PATH. "
                "Exercises will be imported without muscle group associations."
            )
            return cls.empty()

        path = Path(source)
        logger.info(f"Loading exercise muscle groups configuration from: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(
                f"Could not load exercise muscle groups configuration from '{path}': {e}. "
                "Exercises will be imported without muscle group associations."
            )
            return cls.empty()

        if not isinstance(data, dict):
            logger.warning(f"Configuration file is empty or invalid: {path}")
            return cls.empty()

        dictionary = cls(data)
        logger.info(
            f"Successfully loaded {len(dictionary.mapping)} muscle group mappings from configuration file"
        )
        for token, group in dictionary.mapping.items():
            logger.debug(f"  Mapping: {token} -> {group}")
        return dictionary

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    def has_configuration(self) -> bool:
        return len(self._mapping) > 0

    def header_tokens(self) -> Tuple[str, ...]:
        """Configured header tokens, in the order the source document lists them."""
        return tuple(self._mapping.keys())

    def translate(self, token: Optional[str]) -> Optional[MuscleGroup]:
        """
        Translate a header token into a canonical muscle group.

        Returns None when the dictionary is empty, the token is empty,
        the token is not configured, or its configured value is not a
        known MuscleGroup.
        """
        if not token or not self._mapping:
            return None

        value = self._mapping.get(token.strip().upper())
        if value is None:
            return None

        try:
            return MuscleGroup(value.strip().upper())
        except ValueError:
            logger.warning(
                f"Invalid muscle group value '{value}' for header '{token}'. "
                f"Valid values are: {[g.value for g in MuscleGroup]}"
            )
            return None

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"MuscleGroupDictionary({dict(self._mapping)!r})"
