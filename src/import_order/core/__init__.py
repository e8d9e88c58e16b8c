"""
Core Package.

Contains the import order checks:
- Group classification (prefix, pattern and catch-all rules)
- Single-pass ordering validator and static import policies
- Desired import order reporter
- Engine facade and Java import scanner
"""
