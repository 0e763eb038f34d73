"""
Loader for facts documents written by an external inspection step.

A document holds one facts mapping, a list of them, or a mapping with a
``roots`` key whose value is a list of facts or a ``{root: facts}`` mapping.
"""

import json
import os
from typing import Any, Dict, List, Optional

import yaml
from packaging.version import InvalidVersion, Version

from ..exceptions import FactsParseError
from ..logging_config import get_logger
from ..models import OsFacts

logger = get_logger('facts.loader')

JSON_EXTENSIONS = ('.json',)
YAML_EXTENSIONS = ('.yaml', '.yml')

_STRING_FIELDS = ('distro', 'product_name', 'product_variant')
_KNOWN_KEYS = {'root', 'type', 'os_type', 'distro', 'major', 'minor', 'version',
               'product_name', 'product_variant', 'build_id'}


class FactsLoader:
    """Reads facts documents in JSON or YAML format."""

    def __init__(self):
        self.supported_extensions = JSON_EXTENSIONS + YAML_EXTENSIONS

    def load(self, file_path: str) -> List[OsFacts]:
        """
        Load every fact set from a facts document.

        Args:
            file_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            List of OsFacts in document order

        Raises:
            FileNotFoundError: If the file doesn't exist
            FactsParseError: If the file is unreadable or malformed
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Facts file not found: {file_path}")

        data = self._read_document(file_path)
        facts = self.parse_document(data, file_path)
        logger.debug(f"Loaded {len(facts)} fact set(s) from {file_path}")
        return facts

    def _read_document(self, file_path: str) -> Any:
        extension = os.path.splitext(file_path)[1].lower()
        if extension not in self.supported_extensions:
            raise FactsParseError(
                f"Unsupported file extension '{extension}', expected one of "
                f"{', '.join(self.supported_extensions)}",
                file_path=file_path
            )

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if extension in JSON_EXTENSIONS:
                    return json.load(f)
                return yaml.safe_load(f)
        except json.JSONDecodeError as e:
            raise FactsParseError(f"Invalid JSON: {e}", file_path=file_path)
        except yaml.YAMLError as e:
            raise FactsParseError(f"Invalid YAML: {e}", file_path=file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise FactsParseError(f"Cannot read file: {e}", file_path=file_path)

    def parse_document(self, data: Any, file_path: Optional[str] = None) -> List[OsFacts]:
        """
        Turn a decoded facts document into OsFacts.

        Raises:
            FactsParseError: If the document shape or any entry is invalid
        """
        if isinstance(data, dict) and 'roots' in data:
            roots = data['roots']
            if isinstance(roots, dict):
                entries = []
                for root, entry in roots.items():
                    if not isinstance(entry, dict):
                        raise FactsParseError(f"Facts for root '{root}' must be a mapping",
                                              file_path=file_path)
                    entries.append(dict(entry, root=entry.get('root', root)))
            elif isinstance(roots, list):
                entries = roots
            else:
                raise FactsParseError("'roots' must be a list or a mapping", file_path=file_path)
        elif isinstance(data, dict):
            entries = [data]
        elif isinstance(data, list):
            entries = data
        else:
            raise FactsParseError("Document must be a mapping or a list of mappings",
                                  file_path=file_path)

        return [self.parse_entry(entry, index, file_path) for index, entry in enumerate(entries)]

    def parse_entry(self, entry: Any, index: int = 0, file_path: Optional[str] = None) -> OsFacts:
        """Build OsFacts from one mapping."""
        if not isinstance(entry, dict):
            raise FactsParseError("Facts entry must be a mapping", file_path=file_path, entry_index=index)

        unknown_keys = sorted(set(entry) - _KNOWN_KEYS)
        if unknown_keys:
            logger.warning(f"Ignoring unknown facts keys in entry {index}: {', '.join(map(str, unknown_keys))}")

        def fail(message: str):
            raise FactsParseError(message, file_path=file_path, entry_index=index)

        values: Dict[str, Any] = {}
        for key in _STRING_FIELDS:
            value = entry.get(key)
            if value is not None and not isinstance(value, str):
                fail(f"'{key}' must be a string")
            values[key] = value

        os_type = entry.get('type', entry.get('os_type'))
        if os_type is not None and not isinstance(os_type, str):
            fail("'type' must be a string")

        build_id = entry.get('build_id')
        if build_id is not None:
            if isinstance(build_id, bool) or not isinstance(build_id, (str, int)):
                fail("'build_id' must be a string or an integer")
            build_id = str(build_id)

        major = self._parse_version_part(entry, 'major', fail)
        minor = self._parse_version_part(entry, 'minor', fail)
        if entry.get('version') is not None and (major is None or minor is None):
            version_major, version_minor = self._split_version(entry['version'], fail)
            major = version_major if major is None else major
            minor = version_minor if minor is None else minor

        root = entry.get('root')
        return OsFacts(
            os_type=os_type,
            distro=values['distro'],
            major=major or 0,
            minor=minor or 0,
            product_name=values['product_name'],
            product_variant=values['product_variant'],
            build_id=build_id,
            root=str(root) if root is not None else f"root-{index}",
        )

    @staticmethod
    def _parse_version_part(entry: Dict[str, Any], key: str, fail) -> Optional[int]:
        value = entry.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            fail(f"'{key}' must be an integer")
        if isinstance(value, str):
            if not value.strip().isdecimal():
                fail(f"'{key}' must be a non-negative integer, got '{value}'")
            value = int(value)
        if not isinstance(value, int) or value < 0:
            fail(f"'{key}' must be a non-negative integer")
        return value

    @staticmethod
    def _split_version(value: Any, fail):
        # Quote versions in YAML: an unquoted 7.10 reaches us as the float 7.1
        try:
            parsed = Version(str(value))
        except InvalidVersion:
            fail(f"Invalid version '{value}'")
        release = parsed.release
        return release[0], release[1] if len(release) > 1 else 0
