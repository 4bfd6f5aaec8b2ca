"""Mind map layout configuration settings.

This module provides the canvas coordinates and spacing constants used by
the layout engine and by manual node placement.
"""
import logging
from typing import TYPE_CHECKING, Any, Dict

logger = logging.getLogger(__name__)


class LayoutConfigMixin:
    """Mixin class for mind map layout properties.

    This mixin expects the class to inherit from BaseConfig or provide
    _get_int/_get_float helpers.
    """

    if TYPE_CHECKING:
        def _get_cached_value(self, _key: str, _default: Any = None) -> Any:
            """Type stub: method provided by BaseConfig."""
            return _default

        def _get_int(self, _key: str, _default: int, _minimum: int = 0) -> int:
            """Type stub: method provided by BaseConfig."""
            return _default

        def _get_float(self, _key: str, _default: float) -> float:
            """Type stub: method provided by BaseConfig."""
            return _default

    @property
    def ROOT_X(self):
        """Canvas x of the root node."""
        return self._get_float('LAYOUT_ROOT_X', 500.0)

    @property
    def ROOT_Y(self):
        """Canvas y of the root node."""
        return self._get_float('LAYOUT_ROOT_Y', 50.0)

    @property
    def BRANCH_ROW_Y(self):
        """Canvas y of the level-1 row."""
        return self._get_float('LAYOUT_BRANCH_ROW_Y', 200.0)

    @property
    def BRANCH_SPACING(self):
        """Horizontal spacing between level-1 siblings."""
        return self._get_int('LAYOUT_BRANCH_SPACING', 250, minimum=1)

    @property
    def CHILD_SPACING(self):
        """Horizontal spacing between children of the same parent (level 2+)."""
        return self._get_int('LAYOUT_CHILD_SPACING', 180, minimum=1)

    @property
    def ROW_HEIGHT(self):
        """Vertical distance between levels below the branch row."""
        return self._get_int('LAYOUT_ROW_HEIGHT', 150, minimum=1)

    @property
    def DEEP_PARENT_X(self):
        """Base x used when re-deriving the position of a level 2+ parent."""
        return self._get_float('LAYOUT_DEEP_PARENT_X', 300.0)

    @property
    def FALLBACK_X(self):
        """Base x for drafts whose parent cannot be resolved."""
        return self._get_float('LAYOUT_FALLBACK_X', 200.0)

    @property
    def FALLBACK_SPACING(self):
        """Spacing for level 2+ parents and orphaned drafts."""
        return self._get_int('LAYOUT_FALLBACK_SPACING', 200, minimum=1)

    @property
    def MANUAL_SPACING(self) -> Dict[int, int]:
        """Horizontal spacing used when a node is added by hand, per level."""
        return {
            1: self.BRANCH_SPACING,
            2: self.CHILD_SPACING,
            3: self._get_int('LAYOUT_DETAIL_SPACING', 300, minimum=1),
        }
