"""Signal-detection sensitivity (d') with the log-linear correction.

  hit_rate = (hits + 0.5) / (hits + misses + 1)
  fa_rate  = (false_alarms + 0.5) / (non_targets + 1)
  d'       = probit(hit_rate) - probit(fa_rate)

The +0.5 / +1 (Hautus) correction keeps both rates off 0 and 1 for
consistent counts. Rates are also clamped to [1e-4, 1 - 1e-4] before the
probit, so a sheet with more false alarms than non-targets scores as a
near-certain false alarm rate instead of NaN.
"""
from scipy.stats import norm

RATE_EPSILON = 1e-4


def _clamp_rate(rate):
    return max(RATE_EPSILON, min(rate, 1 - RATE_EPSILON))


def corrected_rates(hits, misses, false_alarms, non_targets):
    """Return (hit_rate, fa_rate) after the log-linear correction."""
    hit_rate = (hits + 0.5) / (hits + misses + 1)
    fa_rate = (false_alarms + 0.5) / (non_targets + 1)
    return hit_rate, fa_rate


def calculate_d_prime(hits, misses, false_alarms, non_targets):
    """Sensitivity index for one session's counts. Always finite."""
    hit_rate, fa_rate = corrected_rates(hits, misses, false_alarms, non_targets)
    return float(norm.ppf(_clamp_rate(hit_rate)) - norm.ppf(_clamp_rate(fa_rate)))


def performance_band(d_prime):
    """Coarse label for logs and the dashboard."""
    if d_prime > 2.5:
        return 'mastering'
    if d_prime > 1.5:
        return 'steady'
    if d_prime >= 1.0:
        return 'edge'
    return 'struggling'
