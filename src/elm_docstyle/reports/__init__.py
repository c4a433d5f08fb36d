"""Report aggregation and rendering.

Modules:
    - aggregate: Filter, sort and judge the collected reports
    - render: Human-readable and JSON projections of a RunOutcome
"""
