"""Scoresheet aggregation — tally per-trial outcome tags.

A scoresheet is a list of trials; each trial maps a stimulus tag
('position', 'audio', 'color', ...) to one outcome status. Missing trials
and unknown statuses are never raised on; unknown statuses only count toward
the derived non-target total.
"""
from config.settings import PROGRESSION_DEFAULTS
from engine.sdt import calculate_d_prime

HIT = 'hit'
MISS = 'miss'
LURE_FA = 'lure-fa'
RANDOM_FA = 'random-fa'
NON_TARGET = 'non-target'

FALSE_ALARMS = (LURE_FA, RANDOM_FA)
KNOWN_STATUSES = {HIT, MISS, LURE_FA, RANDOM_FA, NON_TARGET}

NON_TARGET_MODES = ('tagged', 'derived')


def tally_outcomes(scoresheet, non_target_mode=PROGRESSION_DEFAULTS['non_target_mode']):
    """Count hits, misses, false alarms and non-target opportunities.

    non_target_mode:
        'tagged':  non_targets is the number of explicit 'non-target' entries.
        'derived': non_targets is every present entry minus the targets
                    (hits + misses). False alarms and entries with an
                    unscored status count as opportunities too.
    """
    if non_target_mode not in NON_TARGET_MODES:
        raise ValueError(f"non_target_mode must be one of {NON_TARGET_MODES}, got {non_target_mode!r}")

    hits = misses = false_alarms = tagged_non_targets = entries = 0
    for trial in scoresheet or ():
        if not trial:
            continue
        for status in trial.values():
            if status is None:
                continue
            entries += 1
            if status not in KNOWN_STATUSES:
                continue
            if status == HIT:
                hits += 1
            elif status == MISS:
                misses += 1
            elif status in FALSE_ALARMS:
                false_alarms += 1
            else:
                tagged_non_targets += 1

    if non_target_mode == 'derived':
        non_targets = entries - (hits + misses)
    else:
        non_targets = tagged_non_targets

    return {
        'hits': hits,
        'misses': misses,
        'false_alarms': false_alarms,
        'non_targets': non_targets,
    }


def score_scoresheet(scoresheet, non_target_mode=PROGRESSION_DEFAULTS['non_target_mode']):
    """d' over the whole scoresheet. Returns (d_prime, counts)."""
    counts = tally_outcomes(scoresheet, non_target_mode)
    d_prime = calculate_d_prime(
        counts['hits'], counts['misses'],
        counts['false_alarms'], counts['non_targets'],
    )
    return d_prime, counts


def tally_by_tag(scoresheet, tags):
    """Per-tag hits/misses. Any answer that is not a hit or a non-target is a miss."""
    scores = {tag: {'hits': 0, 'misses': 0} for tag in tags}
    for answers in scoresheet or ():
        if not answers:
            continue
        for tag in tags:
            if tag not in answers:
                continue
            if answers[tag] == HIT:
                scores[tag]['hits'] += 1
            elif answers[tag] != NON_TARGET:
                scores[tag]['misses'] += 1
    return scores


def tally_counts(entries):
    """Score a counting task.

    hits: entries marked success with a positive count.
    possible: entries with a positive count, or an explicit failure.
    """
    hits = 0
    possible = 0
    for answers in entries or ():
        if not answers:
            continue
        count = answers.get('count') or 0
        if answers.get('success') and count > 0:
            hits += 1
        if count > 0 or answers.get('success', None) is False:
            possible += 1
    return {'tally': {'hits': hits, 'misses': 0, 'possible': possible}}
