"""Entrypoints (inbound adapters) for caretrack.

Turn user input into service-layer commands and present the results: the
command-line language in :mod:`caretrack.entrypoints.command_line` and the
Click application in :mod:`caretrack.entrypoints.cli`.
"""
