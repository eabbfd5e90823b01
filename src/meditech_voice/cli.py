#!/usr/bin/env python3
"""
Interactive console for the MediTech voice layer.
Drives the same service a UI would: toggle voice, listen, speak, switch locale.
"""

import argparse
import sys
from typing import List, Optional

from .config.settings import get_settings
from .core.service import VoicePortalService, init_voice_service, reset_voice_service
from .core.voice_session import VoiceStatus
from .i18n.locales import list_locales
from .navigation.router import RouteNavigator
from .utils.logger import setup_logger

HELP_TEXT = """Commands:
  voice          toggle voice navigation on/off
  listen         capture one voice command
  stop           cancel the current capture
  say <text>     speak text in the current language
  lang <code>    switch language (en, hi, ta, ml, pa)
  langs          list languages
  t <key>        translate a key
  status         show the voice status
  help           show this help
  quit           exit"""


def print_status(status: VoiceStatus):
    icon = {"disabled": "🔇", "idle": "🟢", "listening": "🎤", "speaking": "🔊"}[status.state.value]
    line = f"{icon} {status.state.value} [{status.locale}]"
    if status.transcript:
        line += f" last heard: {status.transcript!r}"
    print(line)


def handle_command(service: VoicePortalService, line: str) -> bool:
    """Run one console command; returns False when the console should exit"""
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command in ("quit", "exit"):
        return False
    if command == "voice":
        service.toggle_voice()
    elif command == "listen":
        if not service.start_listening():
            print("⚠️  Cannot listen now (voice off, already listening, or no microphone)")
    elif command == "stop":
        if not service.stop_listening():
            print("⚠️  Not listening")
    elif command == "say":
        if not service.speak(argument):
            print("⚠️  Nothing spoken (voice off or no speech output)")
    elif command == "lang":
        if not service.set_locale(argument):
            print(f"❌ Unsupported language: {argument!r}")
    elif command == "langs":
        for info in list_locales():
            print(f"  {info['code']}  {info['native_name']} ({info['english_name']})")
    elif command == "t":
        print(service.translate(argument))
    elif command == "status":
        print_status(service.status())
    elif command in ("help", "?"):
        print(HELP_TEXT)
    elif command:
        print(f"Unknown command: {command} (type 'help')")
    return True


def run_console(service: VoicePortalService, commands: Optional[List[str]] = None):
    """Read commands from the given list, or interactively from stdin"""
    print(f"🩺 {service.translate('appName')} - {service.translate('voiceNavigation')}")
    if not service.controller.voice_output_available:
        print("⚠️  Speech output not available on this device")
    if not service.controller.voice_input_available:
        print("⚠️  Speech input not available on this device")
    print("Type 'help' for commands.")

    if commands is not None:
        for line in commands:
            if not handle_command(service, line):
                break
        return

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\n👋 Voice session ended.")
            break
        if not handle_command(service, line):
            break


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="MediTech voice navigation console")
    parser.add_argument("--locale", help="Language to start in (en, hi, ta, ml, pa)")
    parser.add_argument("--voice", action="store_true", help="Enable voice navigation at startup")
    parser.add_argument("--no-speech-output", action="store_true", help="Disable text-to-speech")
    parser.add_argument("--no-speech-input", action="store_true", help="Disable speech recognition")
    parser.add_argument("--log-level", help="Logging level (overrides LOG_LEVEL)")
    parser.add_argument("-c", "--command", action="append", dest="commands",
                        help="Run a console command and exit (repeatable)")
    args = parser.parse_args(argv)

    setup_logger(level=args.log_level)

    settings = get_settings()
    if args.no_speech_output:
        settings = settings.model_copy(update={"synthesis_backend": "none"})
    if args.no_speech_input:
        settings = settings.model_copy(update={"recognition_backend": "none"})

    navigator = RouteNavigator(on_navigate=lambda route: print(f"➡️  Navigate to {route}"))
    service = init_voice_service(settings=settings, navigator=navigator)
    service.controller.subscribe(print_status)

    try:
        if args.locale and not service.set_locale(args.locale):
            print(f"❌ Unsupported language: {args.locale!r}")
            return 2
        if args.voice:
            service.toggle_voice()
        run_console(service, args.commands)
    finally:
        reset_voice_service()
    return 0


if __name__ == "__main__":
    sys.exit(main())
