"""Static package metadata surfaced to the CLI.

Contents:
    * Distribution identity (``name``, ``title``, ``version``, ``shell_command``).
"""

from __future__ import annotations

#: Import package name.
name = "sparkpost_sample"

#: One-line description shown in ``--help`` output.
title = "Create a stored SparkPost template and send a transmission that uses it"

#: Release version.
version = "1.0.0"

#: Console script name.
shell_command = "sparkpost-template-sample"
