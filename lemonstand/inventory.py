# lemonstand/inventory.py
import math
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from .config import ICE_SPOILAGE_FRACTION

if TYPE_CHECKING:
    from .models import Recipe


class Batch(BaseModel):
    """A brewed batch with units still to be poured."""
    batch_size: int = Field(ge=1)
    units_remaining: int = Field(ge=1)


class ProductionState(BaseModel):
    """
    Ingredient book-keeping plus the batch in progress.

    Batch lifecycle:
      no batch  --brew-->  batch(N)  --serve-->  batch(N-1) ... batch(1) --serve--> no batch
    Brewing is the only way in, serving the only way down.
    """
    lemons: int = Field(default=0, ge=0)
    sugar: int = Field(default=0, ge=0)   # Cups of sugar
    ice: int = Field(default=0, ge=0)     # Ice cubes
    cups: int = Field(default=0, ge=0)    # Paper cups
    batch: Optional[Batch] = None

    @property
    def units_remaining(self) -> int:
        return self.batch.units_remaining if self.batch else 0

    @property
    def has_active_batch(self) -> bool:
        return self.batch is not None

    def add_supplies(self, lemons: int = 0, sugar: int = 0, ice: int = 0, cups: int = 0) -> None:
        self.lemons += lemons
        self.sugar += sugar
        self.ice += ice
        self.cups += cups

    def try_brew_batch(self, recipe: 'Recipe') -> bool:
        """Brew a batch if lemons and sugar allow. Returns True if brewed."""
        if self.lemons < recipe.lemons_per_batch or self.sugar < recipe.sugar_per_batch:
            return False
        self.lemons -= recipe.lemons_per_batch
        self.sugar -= recipe.sugar_per_batch
        self.batch = Batch(batch_size=recipe.units_per_batch,
                           units_remaining=recipe.units_per_batch)
        return True

    def serve_one(self, recipe: 'Recipe') -> bool:
        """
        Pour exactly one unit, brewing a new batch on demand.
        Returns False (and changes nothing) on a stock-out.
        """
        if self.cups <= 0 or self.ice < recipe.ice_per_unit:
            return False

        if self.batch is None and not self.try_brew_batch(recipe):
            return False

        self.cups -= 1
        self.ice -= recipe.ice_per_unit
        if self.batch.units_remaining <= 1:
            self.batch = None
        else:
            self.batch.units_remaining -= 1
        return True

    def apply_spoilage(self, fraction: float = ICE_SPOILAGE_FRACTION) -> None:
        # Only ice melts; a batch in progress carries over
        self.ice = max(0, math.floor(self.ice * (1 - fraction)))
