"""Parsers for user-supplied markup."""

from .logo_parser import LogoParser

__all__ = ["LogoParser"]
