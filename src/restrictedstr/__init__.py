"""Strings guaranteed not to contain a set of forbidden characters.

This package provides byte string types for values handed to operating
system APIs (file paths, process arguments, environment values), where
characters such as NUL are illegal or dangerous.

Classes:
    RestrictedStr: Abstract, mutable byte string whose class fixes a set of
        forbidden characters. Checked constructors and mutators keep the
        content free of those characters.
    PathStr: RestrictedStr without the NUL character, for paths and
        command arguments. Implements os.PathLike.

Functions:
    to_path_str(): Checked conversion to PathStr.
    to_without(): Checked conversion to the RestrictedStr class of a set.
    filter_without(): Drop forbidden characters and wrap the result.

Exceptions:
    InvalidCharacterError: A single character was rejected by a mutation.
    InvalidContentError: A checked conversion found a forbidden character;
        carries its position.

Note:
    Heavy editing is cheaper on plain bytes or str, followed by one checked
    conversion back.
"""
from ._version_info import __version__
from .forbidden_chars import *
from .exceptions import (ForbiddenCharacterError, InvalidCharacterError,
                         InvalidContentError)
from .restricted_str import RestrictedStr, to_without, filter_without
from .path_str import PathStr, to_path_str
