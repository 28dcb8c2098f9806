"""
Core building blocks shared by the algorithms: element type constraints,
predicates and comparators, explicit results, configuration, logging,
and boundary contract validation.
"""
