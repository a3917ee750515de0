"""Plans the resolutions at which trapezoid estimates are computed.

A set of ``N`` equally spaced samples spans ``m = N - 1`` intervals. A
trapezoid estimate can use every ``s``-th sample whenever ``s`` divides
``m``, so the available resolutions follow from the prime factors of ``m``:
starting from ``s = 1`` (every sample) and multiplying by one prime factor
at a time gives a chain of step multipliers that ends at ``s = m`` (the
endpoints only).

When ``m`` is a power of two the chain is simply ``1, 2, 4, ..., m`` and no
factorization is needed.
"""

from __future__ import annotations

from rombergkit.logger import rombergkit_logger
from rombergkit.utils.factorization import is_power_of_two, prime_factors
from rombergkit.utils.validate import validate_sample_count

__all__ = ["plan_step_multipliers", "max_depth"]


def plan_step_multipliers(n: int) -> tuple[int, ...]:
    """Returns the step multipliers for ``n`` samples, coarsest first.

    Args:
        n: Number of equally spaced samples.

    Returns:
        Strictly decreasing tuple of multipliers ending in ``1``. Each entry
        divides ``n - 1``, and the first one equals ``n - 1``. The tuple has
        one entry more than the number of prime factors of ``n - 1`` (with
        multiplicity). Fewer than two samples give an empty plan; two samples
        give ``(1,)``, a single trapezoid with nothing to extrapolate.

    Raises:
        InvalidInputError: If ``n`` is negative or not an integer.
    """
    n = validate_sample_count(n)
    if n < 2:
        return ()

    m = n - 1
    if is_power_of_two(m):
        plan = tuple(1 << k for k in range(m.bit_length() - 1, -1, -1))
    else:
        multipliers = [1]
        for prime, multiplicity in prime_factors(m):
            for _ in range(multiplicity):
                multipliers.append(multipliers[-1] * prime)
        plan = tuple(reversed(multipliers))

        if len(plan) == 2:
            rombergkit_logger.info(
                "n - 1 = %d is prime; only one refinement step is available, "
                "expect reduced accuracy.",
                m,
            )

    rombergkit_logger.debug("planned step multipliers for n=%d: %s", n, plan)
    return plan


def max_depth(n: int) -> int:
    """Returns the number of trapezoid levels available for ``n`` samples.

    This is the largest ``max_steps`` accepted by
    :func:`rombergkit.romberg.romberg`. A single sample counts as one level
    so that its (zero) integral can still be requested explicitly.
    """
    return max(len(plan_step_multipliers(n)), 1 if n >= 1 else 0)
