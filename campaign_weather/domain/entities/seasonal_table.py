"""Seasonal condition table entity."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class SeasonalTable:
    """Weather conditions for one season of a region.

    Conditions are listed most probable first, although selection treats
    them uniformly. Mechanical impacts map a subset of the conditions to the
    rule effects announced alongside them.
    """

    conditions: Tuple[str, ...]
    mechanical_impacts: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        conditions: Iterable[str],
        mechanical_impacts: Optional[Mapping[str, Sequence[str]]] = None,
        context: str = "",
    ) -> "SeasonalTable":
        """
        Build a validated table.

        Args:
            conditions: Condition labels in order of listing
            mechanical_impacts: Optional map of condition to impact strings
            context: Region/season description used in error messages

        Returns:
            SeasonalTable with normalized tuples

        Raises:
            ConfigurationError: If a condition repeats, an entry is not a string,
                or an impact refers to a condition missing from the list
        """
        where = context or "seasonal table"
        conditions = list(conditions)
        for condition in conditions:
            if condition is not None and not isinstance(condition, str):
                raise ConfigurationError(
                    f"Condition {condition!r} in {where} must be a string"
                )

        labels = tuple(c.strip() for c in conditions if c and c.strip())
        duplicates = sorted({c for c in labels if labels.count(c) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Duplicate conditions {duplicates} in {where}"
            )

        if mechanical_impacts is not None and not isinstance(mechanical_impacts, Mapping):
            raise ConfigurationError(
                f"Mechanical impacts in {where} must map conditions to impacts"
            )

        impacts: Dict[str, Tuple[str, ...]] = {}
        for condition, effects in (mechanical_impacts or {}).items():
            if condition not in labels:
                raise ConfigurationError(
                    f"Mechanical impact references unknown condition "
                    f"'{condition}' in {where}"
                )
            if isinstance(effects, str):
                effects = [effects]
            if not isinstance(effects, (list, tuple)) or not all(
                isinstance(effect, str) for effect in effects
            ):
                raise ConfigurationError(
                    f"Mechanical impacts for '{condition}' in {where} must be strings"
                )
            impacts[condition] = tuple(effects)

        return cls(conditions=labels, mechanical_impacts=impacts)

    def impacts_for(self, condition: str) -> Tuple[str, ...]:
        """Impacts attached to a condition, empty when it has none."""
        return self.mechanical_impacts.get(condition, ())

    def __len__(self) -> int:
        return len(self.conditions)
