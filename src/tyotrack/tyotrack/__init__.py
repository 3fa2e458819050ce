"""Tyotrack time-entry package.

Organized by feature modules (time entries, settings, ...) with a thin Flask
controller layer over service/repository layers. The shift splitting,
classification, validation and assembly code in ``timeentries`` is pure.
"""
