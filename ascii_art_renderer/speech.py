#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Speech
====================================
Platform text-to-speech behind a single speak() capability. The
implementation is chosen once from the running platform.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import platform
import shutil
import subprocess

from ascii_art_renderer.errors import SpeechUnavailable
from ascii_art_renderer.logging_setup import get_logger
from ascii_art_renderer.words import number_to_words, spelled_for_speech


class Speaker(ABC):
    """Text-to-speech through an external command."""

    executable: str = ""

    def locate_executable(self) -> str:
        path = shutil.which(self.executable)
        if path is None:
            raise SpeechUnavailable(f"Text-to-speech command not found: {self.executable}")
        return path

    @abstractmethod
    def command(self, executable: str, text: str) -> List[str]:
        """Argument list that speaks `text` with `executable`."""

    def speak(self, text: str) -> int:
        cmd = self.command(self.locate_executable(), text)
        get_logger().debug("speaking via %s", cmd[0])
        return subprocess.call(cmd)

    def speak_number(self, num: int) -> int:
        return self.speak(number_to_words(num))

    def speak_spelled(self, word: str) -> int:
        return self.speak(spelled_for_speech(word))


class EspeakSpeaker(Speaker):
    executable = "espeak"

    def command(self, executable: str, text: str) -> List[str]:
        return [executable, text]


class SaySpeaker(Speaker):
    executable = "say"

    def command(self, executable: str, text: str) -> List[str]:
        return [executable, text]


def powershell_quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


class SapiSpeaker(Speaker):
    executable = "powershell"

    def command(self, executable: str, text: str) -> List[str]:
        script = (
            "$v=New-Object -ComObject SAPI.SpVoice; "
            f"$null = $v.Speak({powershell_quote(text)});"
        )
        return [executable, "-NoProfile", "-Command", script]


def select_speaker(system: Optional[str] = None) -> Speaker:
    name = system if system is not None else platform.system()
    if name == "Windows":
        return SapiSpeaker()
    if name == "Darwin":
        return SaySpeaker()
    return EspeakSpeaker()
