"""Console encoding setup for Unicode output.

Windows consoles (cmd, PowerShell) use code pages like cp1252 by default,
which cannot encode box-drawing table borders or wide characters. This
module configures UTF-8 output before anything is printed.
"""

import os
import sys


def configure_utf8_output() -> None:
    """Configure stdout and stderr to use UTF-8 encoding with error handling.

    Only acts on Windows, where the console encoding defaults to a code
    page. Uses 'replace' error handling so unencodable characters are
    substituted rather than raising UnicodeEncodeError.

    Safe to call more than once, and a no-op for streams that do not
    support reconfiguration (e.g. replaced by a test harness).
    """
    if sys.platform != 'win32':
        return

    os.environ.setdefault('PYTHONIOENCODING', 'utf-8:replace')

    for stream in (sys.stdout, sys.stderr):
        # Python 3.7+ supports reconfigure() on text streams
        if hasattr(stream, 'reconfigure'):
            stream.reconfigure(encoding='utf-8', errors='replace')
