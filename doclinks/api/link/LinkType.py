"""Markdown link style enum."""

from enum import Enum


class LinkType(str, Enum):
    INLINE = "inline"
    REFERENCE = "reference"
    COLLAPSED = "collapsed"
    SHORTCUT = "shortcut"
    AUTOLINK = "autolink"
    EMAIL = "email"
