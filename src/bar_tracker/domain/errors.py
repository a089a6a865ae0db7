"""Error types raised by the bar tracker."""


class LoadFailure(RuntimeError):
    """Catalog or inventory data could not be loaded."""


class InvalidAmountInput(ValueError):
    """A stock amount was non-numeric or negative."""


class UnknownIngredient(KeyError):
    """No ingredient exists for the given id."""


class UnknownDrink(KeyError):
    """No drink exists for the given id."""
