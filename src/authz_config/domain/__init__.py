"""Domain layer - roles, configuration properties and their validation rules.

Secure values are encrypted through a cipher passed in by the caller, or
through the settings-keyed encryption service when none is given.
"""
