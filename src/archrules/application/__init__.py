"""Application layer.

- engine: Rule evaluation, single rule and suite
- layered: Layered architecture checker
- reporters: Output formatting (plain text, JSON, rich console)
"""
