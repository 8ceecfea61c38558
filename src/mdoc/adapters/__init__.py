"""Derive mdoc documents from other descriptions of a program."""

from mdoc.adapters.command import document_from_command

__all__ = ["document_from_command"]
