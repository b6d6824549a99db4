import math

from errors import PositionInvariantError
from models import RECOMMEND_BUY, RECOMMEND_DONT_BUY, Recommendation

# Range position (percent) at and above which the price is considered too
# close to its recent high to buy.
BUY_BELOW_POSITION_PCT = 50.0

# Upper bound (exclusive) of a valid range position.
MAX_POSITION_PCT = 100.0


def recommend(position: float) -> Recommendation:
    """
    Map a range position to a recommendation.

      - [0, 50)   -> "Buy"        (price in the lower half of its range)
      - [50, 100) -> "Don't buy"

    Any other value (negative, >= 100, NaN) cannot come out of a correct
    range computation, so it raises PositionInvariantError rather than
    a user-facing ReportError.
    """
    if math.isnan(position) or not 0.0 <= position < MAX_POSITION_PCT:
        raise PositionInvariantError(
            f"bad percentage {position}: range position must be in "
            f"[0, {MAX_POSITION_PCT:.0f})"
        )

    if position < BUY_BELOW_POSITION_PCT:
        return RECOMMEND_BUY
    return RECOMMEND_DONT_BUY
