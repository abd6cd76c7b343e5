#!/usr/bin/env python3
# forge/language/en.py
from __future__ import annotations

"""English messages, one dict per message file."""

CLI = {
    "altCommandPlural": "Did you mean one of these?",
    "altCommandSingular": "Did you mean this?",
    "commandNotFound": 'Command "{0}" not found.',
    "helpArguments": "Arguments:",
    "helpDescription": "Description:",
    "helpOptions": "Options:",
    "helpUsage": "Usage:",
    "invalidColor": "Invalid color: {0}.",
    "listCommands": "Available commands:",
}

Errors = {
    "uncaughtException": "An uncaught Exception was encountered",
    "type": "Type:",
    "message": "Message:",
    "filename": "Filename:",
    "lineNumber": "Line Number:",
    "backtrace": "Backtrace:",
    "unknown": "(unknown)",
}
