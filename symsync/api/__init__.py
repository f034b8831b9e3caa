"""symsync API layer.

Every user-facing operation is a ``cmd_*`` function returning a StageResult.
"""
