"""Default configuration parameters for the lesson modules."""

from dataclasses import dataclass, field


def _default_notes() -> dict[int, int]:
    return {2000: 3, 500: 5, 200: 10, 100: 20}


def _default_prices() -> dict[str, float]:
    return {
        # Singh family, regular buns
        "basic_burger": 120.0,
        "standard_burger": 150.0,
        "premium_burger": 200.0,
        "basic_garlic_bread": 80.0,
        "cheese_garlic_bread": 110.0,
        # King family, wheat buns
        "basic_wheat_burger": 140.0,
        "standard_wheat_burger": 170.0,
        "premium_wheat_burger": 230.0,
        "basic_wheat_garlic_bread": 95.0,
        "cheese_wheat_garlic_bread": 125.0,
    }


@dataclass(frozen=True)
class AtmParams:
    """Note inventory loaded into the dispenser chain."""
    notes: dict[int, int] = field(default_factory=_default_notes)  # denomination -> count


@dataclass(frozen=True)
class MenuParams:
    """Menu prices for the factory lesson."""
    prices: dict[str, float] = field(default_factory=_default_prices)
    currency: str = "INR"


@dataclass(frozen=True)
class PaymentParams:
    """Payment gateway parameters."""
    max_retries: int = 3
    retry_delay_seconds: float = 0.5
    min_amount: float = 1.0
    currency: str = "INR"


@dataclass(frozen=True)
class EditorParams:
    """Document editor storage parameters."""
    storage_path: str = "document.txt"
    db_path: str = "documents.db"


@dataclass(frozen=True)
class LessonConfig:
    """Complete lesson configuration."""
    atm: AtmParams
    menu: MenuParams
    payment: PaymentParams
    editor: EditorParams


def get_default_config() -> LessonConfig:
    """Get the default configuration instance."""
    return LessonConfig(
        atm=AtmParams(),
        menu=MenuParams(),
        payment=PaymentParams(),
        editor=EditorParams(),
    )
