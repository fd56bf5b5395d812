"""CLI command modules.

This package contains:
- group: Coloured click group with typo suggestions
- auth: Key creation command (create-key)
- inspection: Inspection commands (list, discover)
- control: Device control command (light)
"""
