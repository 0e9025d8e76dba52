"""activitybox — Programming activity system for the console.

Four small student exercises behind one text menu: a static student info
card, a grade evaluator, a triangle printer and a fixed-rate currency
converter. Every prompt is validated and re-asked until the answer fits.

Usage:
    python -m activitybox                         # Interactive menu
    python -m activitybox list                    # Show activities
    python -m activitybox start currency          # Jump into one activity
    python -m activitybox convert 1000 --yes      # One-shot conversion
"""

__version__ = "0.1.0"
