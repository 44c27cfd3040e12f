"""Domain layer for finsight application.

Submodules are imported directly (``finsight.domain.insights`` and so on) so
the database layer can depend on ``finsight.domain.entities`` without cycles.
"""
