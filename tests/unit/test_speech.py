import sys
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from ascii_art_renderer.errors import SpeechUnavailable
from ascii_art_renderer.speech import (
    EspeakSpeaker,
    SapiSpeaker,
    SaySpeaker,
    Speaker,
    powershell_quote,
    select_speaker,
)


class SpeakerSelectionTests(unittest.TestCase):
    def test_platforms(self):
        self.assertIsInstance(select_speaker("Windows"), SapiSpeaker)
        self.assertIsInstance(select_speaker("Darwin"), SaySpeaker)
        self.assertIsInstance(select_speaker("Linux"), EspeakSpeaker)


class SpeakerTests(unittest.TestCase):
    def test_base_speaker_is_abstract(self):
        with self.assertRaises(TypeError):
            Speaker()

    def test_espeak_command(self):
        with patch("ascii_art_renderer.speech.shutil.which", return_value="/usr/bin/espeak"), \
                patch("ascii_art_renderer.speech.subprocess.call", return_value=0) as call:
            rc = EspeakSpeaker().speak_number(300)
        self.assertEqual(rc, 0)
        call.assert_called_once_with(["/usr/bin/espeak", "three hundred"])

    def test_spelled(self):
        with patch("ascii_art_renderer.speech.shutil.which", return_value="say"), \
                patch("ascii_art_renderer.speech.subprocess.call", return_value=0) as call:
            SaySpeaker().speak_spelled("Hi")
        call.assert_called_once_with(["say", "H, I"])

    def test_sapi_quotes_text(self):
        cmd = SapiSpeaker().command("powershell", "it's")
        self.assertEqual(cmd[:3], ["powershell", "-NoProfile", "-Command"])
        self.assertIn("$v.Speak('it''s')", cmd[3])
        self.assertEqual(powershell_quote("a'b"), "'a''b'")

    def test_missing_executable(self):
        with patch("ascii_art_renderer.speech.shutil.which", return_value=None):
            with self.assertRaises(SpeechUnavailable):
                EspeakSpeaker().speak("hello")


if __name__ == "__main__":
    unittest.main()
