import logging
import operator

from .errors import IsqrtOverflowError, IsqrtUnderflowError, OutOfRangeError
from .sqrt.full import get_isqrt
from .widths import DEFAULT_WIDTH, check_value, max_value, parse_width

logger = logging.getLogger(__name__)


class GradualSqrtTracker:
    """
    Keeps ``s = floor(sqrt(n))`` for a value ``n`` that changes over time.

    The tracker caches the bracket ``[lo, hi] = [s*s, (s+1)**2 - 1]`` of
    values sharing the current root. An update landing inside the bracket
    costs two comparisons; one landing outside walks ``s`` a step at a time,
    moving the bracket with additions only. When the walk would be long the
    root is recomputed from scratch with ``full_sqrt`` instead; both paths
    give the same answer.

    Every update is checked before anything is written, so a failed call
    leaves ``(n, s)`` exactly as it was.

    :param initial: starting value, within ``[0, 2**width - 1]``.
    :param width: value width in bits, ``8``/``16``/``32``/``64``/``128`` or ``"u32"`` etc.
    :param full_sqrt: name in :data:`gradual_isqrt.sqrt.isqrt_map`, or a callable.
    :param step_limit: longest walk before falling back to ``full_sqrt``.
        Defaults to the width in bits; ``0`` recomputes whenever the root moves.

    Not thread safe: share an instance across threads only under a lock.
    """

    def __init__(
        self,
        initial: int = 0,
        width=DEFAULT_WIDTH,
        full_sqrt="newton",
        step_limit: int = None,
    ):
        self.width = parse_width(width)
        self.max_value = max_value(self.width)
        self._full_sqrt = get_isqrt(full_sqrt)
        self.full_sqrt_name = getattr(full_sqrt, "__name__", full_sqrt)

        if step_limit is None:
            step_limit = self.width
        step_limit = operator.index(step_limit)
        if step_limit < 0:
            raise ValueError(f"step_limit must be non-negative, got {step_limit}")
        self.step_limit = step_limit

        self.stats = {"updates": 0, "steps": 0, "recomputes": 0, "errors": 0}
        self._recompute(check_value(initial, self.max_value, "initial value"))

    @classmethod
    def new(cls, initial_n: int = 0, **kwargs):
        return cls(initial_n, **kwargs)

    # ---------------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------------

    @property
    def n(self) -> int:
        return self._n

    @property
    def s(self) -> int:
        return self._s

    def value(self) -> int:
        return self._n

    def root(self) -> int:
        return self._s

    # ---------------------------------------------------------------------------
    # Updates
    # ---------------------------------------------------------------------------

    def set(self, new_n: int) -> int:
        """Move to the absolute value ``new_n`` and return the new root."""
        self._settle(self._checked(new_n, "value"))
        return self._s

    def add(self, delta: int) -> int:
        """Apply a signed ``delta`` to the value and return the new root."""
        delta = operator.index(delta)
        candidate = self._n + delta
        if candidate < 0:
            self._fail(
                IsqrtUnderflowError(
                    f"{self._n} + ({delta}) = {candidate} is below zero",
                    value=candidate,
                    maximum=self.max_value,
                )
            )
        if candidate > self.max_value:
            self._fail(
                IsqrtOverflowError(
                    f"{self._n} + ({delta}) = {candidate} exceeds the u{self.width} maximum {self.max_value}",
                    value=candidate,
                    maximum=self.max_value,
                )
            )
        self._settle(candidate)
        return self._s

    def sub(self, delta: int) -> int:
        return self.add(-operator.index(delta))

    def reset(self, initial: int = 0) -> int:
        """Start over at ``initial`` with a full recompute, e.g. after a known jump."""
        self._recompute(self._checked(initial, "value"))
        self.stats["updates"] += 1
        return self._s

    def __iadd__(self, delta):
        self.add(delta)
        return self

    def __isub__(self, delta):
        self.sub(delta)
        return self

    # ---------------------------------------------------------------------------
    # Internals
    # ---------------------------------------------------------------------------

    def _checked(self, x, what: str) -> int:
        try:
            return check_value(x, self.max_value, what)
        except OutOfRangeError as e:
            self._fail(e)

    def _fail(self, error):
        self.stats["errors"] += 1
        logger.debug(f"Rejected update of u{self.width} tracker at n={self._n}: {error}")
        raise error

    def _commit(self, n: int, s: int, lo: int, hi: int):
        self._n, self._s, self._lo, self._hi = n, s, lo, hi

    def _recompute(self, n: int):
        s = self._full_sqrt(n)
        self._commit(n, s, s * s, s * s + 2 * s)
        self.stats["recomputes"] += 1
        logger.debug(f"Recomputed isqrt({n}) = {s} with {self.full_sqrt_name}")

    def _estimate_steps(self, n: int) -> int:
        # Brackets above s hold at least 2s + 3 values, so going up this
        # slightly overestimates. Brackets below hold at most 2s - 1, so going
        # down it underestimates and only the cap in _settle bounds the walk.
        s = self._s
        if n > self._hi:
            return (n - self._hi) // (2 * s + 1)
        return min(s, (self._lo - n) // (2 * s - 1))

    def _settle(self, n: int):
        """Restore ``lo <= n <= hi`` for the new value ``n``."""
        self.stats["updates"] += 1
        s, lo, hi = self._s, self._lo, self._hi
        if lo <= n <= hi:
            self._n = n
            return
        if self._estimate_steps(n) > self.step_limit:
            self._recompute(n)
            return

        steps = 0
        if n > hi:
            while n > hi:
                if steps == self.step_limit:
                    self.stats["steps"] += steps
                    self._recompute(n)
                    return
                s += 1
                lo = hi + 1
                hi = lo + 2 * s
                steps += 1
        else:
            while n < lo:
                if steps == self.step_limit:
                    self.stats["steps"] += steps
                    self._recompute(n)
                    return
                s -= 1
                hi = lo - 1
                lo = hi - 2 * s
                steps += 1
        self.stats["steps"] += steps
        self._commit(n, s, lo, hi)

    # ---------------------------------------------------------------------------
    # Python protocol
    # ---------------------------------------------------------------------------

    def __int__(self) -> int:
        return self._s

    def __eq__(self, other):
        if not isinstance(other, GradualSqrtTracker):
            return NotImplemented
        return (self.width, self._n) == (other.width, other._n)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, s={self._s}, width=u{self.width})"
