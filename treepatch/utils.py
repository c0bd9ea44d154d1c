# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


class Printer:
    "File-like writer going through print(), so capsys sees the output."
    def write(self, text):
        print(text, end="")


def read_document(f):
    """Read and return a json document from filename

    Parameters:
        f:  The filename to read from. The null filename ("/dev/null"
            on *nix, "nul" on Windows) reads as an empty object.
            Alternatively a file-like object can be passed.
    """
    if f == EXPLICIT_MISSING_FILE:
        return {}
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    return json.load(f)


def write_document(doc, f, indent=2):
    "Write doc as json to filename or file-like object f."
    if isinstance(f, str):
        with io.open(f, 'w', encoding='utf-8') as fo:
            write_document(doc, fo, indent=indent)
        return
    json.dump(doc, f, indent=indent, separators=(",", ": "), ensure_ascii=False)
    f.write("\n")


def _escape_unencodable_output():
    """Make stdout/err backslash-escape characters their encoding lacks.

    Only the interpreter's own streams with the strict error handler
    are rewrapped, and nothing is done when PYTHONIOENCODING is set.
    """
    if os.getenv('PYTHONIOENCODING'):
        return
    fallback = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        if stream is not getattr(sys, '__%s__' % name):
            continue
        if (getattr(stream, 'errors', None) or 'strict') != 'strict':
            continue
        encoding = getattr(stream, 'encoding', None) or fallback
        writer = codecs.getwriter(encoding)(stream.buffer, errors='backslashreplace')
        setattr(sys, name, writer)


def setup_std_streams():
    "Prepare stdout/err for printing documents and colored patches."
    _escape_unencodable_output()
    # colorama wraps the streams, so it goes after the re-encoding
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
