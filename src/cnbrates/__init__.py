"""
cnbrates - CNB Daily Exchange Rates Service

Fetches the Czech National Bank daily exchange rate feed, parses it into
typed records and serves it as JSON for currency conversion clients.
"""

__version__ = "1.0.0"
