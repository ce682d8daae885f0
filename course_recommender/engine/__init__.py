"""
Recommendation engine: scores five courses from one AttributeRecord and
ranks them.  Every module is pure: no I/O and no state between calls.

Modules
-------
membership  : triangular_membership() + the named fuzzy-set tables.
scorer      : subject_scores(), interest_scores(), combine(),
              adjust_by_preferences(), apply_floor() + weight tables.
rules       : FuzzyRule table + evaluate_fuzzy_rules() (min/max composition).
ranker      : rank_courses() + build_result().
recommender : recommend() / recommend_from_payload() + RecommendationError.
selftest    : canonical regression scenario + run_self_test().
"""
