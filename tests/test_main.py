"""Tests for the command-line interface."""

import argparse
import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from coqui_helper.__main__ import build_config, main, process_directory
from coqui_helper.coqui_tts import CoquiTTS, CoquiTTSConfig
from coqui_helper.runner import CommandFailedError


class TestMain:
    """Tests for main()."""

    def test_create_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test --create-config writes a loadable configuration."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit) as exc_info:
            main(["--create-config"])

        assert exc_info.value.code == 0
        config = CoquiTTSConfig.from_json(tmp_path / "config.json")
        assert config == CoquiTTSConfig()

    def test_list_models(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing one category."""
        with pytest.raises(SystemExit):
            main(["--list-models", "vocoder_models"])

        out = capsys.readouterr().out
        assert "vocoder_models/universal/libri-tts/wavegrad" in out
        assert "tts_models" not in out

    def test_list_all_models(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing every category."""
        with pytest.raises(SystemExit):
            main(["--list-models"])

        out = capsys.readouterr().out
        assert "tts_models/multilingual/multi-dataset/xtts_v2" in out
        assert "voice cloning" in out
        assert "voice_conversion_models/multilingual/vctk/freevc24" in out

    def test_requires_input(self) -> None:
        """Test text or --input is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2

    def test_print_args(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --print-args shows the command without running it."""
        main(
            [
                "Hallo",
                "-o",
                "a.wav",
                "-m",
                "tts_models/de/thorsten/vits",
                "-d",
                "cpu",
                "--output-dir",
                str(tmp_path),
                "--print-args",
            ]
        )

        out = capsys.readouterr().out
        assert out.startswith("tts --device cpu --model_name tts_models/de/thorsten/vits")
        assert "--out_path" in out
        assert not (tmp_path / "a.wav").exists()

    @patch.object(CoquiTTS, "synthesize_to_file", return_value="done")
    def test_synthesize_text(
        self,
        mock_synth: Mock,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test text synthesis."""
        main(["Hello", "-o", "hello.wav", "--output-dir", str(tmp_path), "-d", "cpu"])

        mock_synth.assert_called_once_with("Hello", Path("hello.wav"))
        assert "Saved audio to" in capsys.readouterr().out

    @patch.object(CoquiTTS, "synthesize_to_file")
    def test_failure_exit_code(
        self,
        mock_synth: Mock,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test failures exit with status 1."""
        mock_synth.side_effect = CommandFailedError(["tts"], 1, "out of memory")

        with pytest.raises(SystemExit) as exc_info:
            main(["Hello", "-o", "hello.wav", "--output-dir", str(tmp_path)])

        assert exc_info.value.code == 1
        assert "out of memory" in capsys.readouterr().err

    @patch.object(CoquiTTS, "synthesize_to_file", side_effect=KeyboardInterrupt)
    def test_interrupt_exit_code(self, mock_synth: Mock, tmp_path: Path) -> None:
        """Test Ctrl-C exits with status 130."""
        with pytest.raises(SystemExit) as exc_info:
            main(["Hello", "-o", "hello.wav", "--output-dir", str(tmp_path)])

        assert exc_info.value.code == 130

    def test_invalid_model(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test invalid options are reported."""
        with pytest.raises(SystemExit) as exc_info:
            main(["Hello", "-o", "a.wav", "-m", "xtts_v2"])

        assert exc_info.value.code == 1
        assert "Invalid model name" in capsys.readouterr().err

    def test_missing_config(self, tmp_path: Path) -> None:
        """Test a missing config file."""
        with pytest.raises(SystemExit) as exc_info:
            main(["Hello", "-o", "a.wav", "-c", str(tmp_path / "missing.json")])

        assert exc_info.value.code == 1

    @patch.object(CoquiTTS, "synthesize_to_file", return_value="")
    def test_config_file_with_override(
        self, mock_synth: Mock, tmp_path: Path
    ) -> None:
        """Test command-line options override the config file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(
            json.dumps({"model": "tts_models/en/vctk/vits", "max_retries": 5}),
            encoding="utf-8",
        )

        with patch("coqui_helper.__main__.CoquiTTS", wraps=CoquiTTS) as mock_cls:
            main(
                [
                    "Hello",
                    "-o",
                    "a.wav",
                    "-c",
                    str(config_path),
                    "--max-retries",
                    "2",
                    "--output-dir",
                    str(tmp_path),
                ]
            )

        config = mock_cls.call_args[0][0]
        assert config.model == "tts_models/en/vctk/vits"
        assert config.max_retries == 2


class TestBuildConfig:
    """Tests for merging config files and options."""

    def test_unset_options_keep_config(self) -> None:
        """Test options that were not given do not override the file."""
        args = argparse.Namespace(
            model=None,
            model_path=None,
            language="de",
            vocoder=None,
            voice_conversion=None,
            speaker=None,
            speaker_wav=None,
            speaker_idx=None,
            device=None,
            output_dir=None,
            max_retries=None,
            command=None,
            verbose=False,
        )

        config = build_config(args, {"device": "cpu", "language": "fr"})

        assert config.device == "cpu"
        assert config.language == "de"
        assert config.verbose is False


class TestProcessDirectory:
    """Tests for directory mode."""

    def test_process_directory(self, tmp_path: Path) -> None:
        """Test every .txt file is synthesized and existing outputs skipped."""
        input_dir = tmp_path / "chapters"
        input_dir.mkdir()
        for name in ("01.txt", "02.txt", "03.txt", "notes.md"):
            (input_dir / name).write_text("text", encoding="utf-8")

        output_dir = tmp_path / "audio"
        output_dir.mkdir()
        (output_dir / "02.wav").write_bytes(b"")

        tts = CoquiTTS(CoquiTTSConfig(output_dir=str(output_dir), device="cpu"))
        with patch.object(CoquiTTS, "synthesize_file") as mock_synth:
            count = process_directory(tts, input_dir)

        assert count == 2
        outputs = [call.args[1] for call in mock_synth.call_args_list]
        assert outputs == ["01.wav", "03.wav"]

    def test_skipped_files_reported(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test existing outputs are reported on stderr without --verbose."""
        input_dir = tmp_path / "chapters"
        input_dir.mkdir()
        for name in ("01.txt", "02.txt"):
            (input_dir / name).write_text("text", encoding="utf-8")

        output_dir = tmp_path / "audio"
        output_dir.mkdir()
        (output_dir / "01.wav").write_bytes(b"")
        (output_dir / "02.wav").write_bytes(b"")

        tts = CoquiTTS(CoquiTTSConfig(output_dir=str(output_dir), device="cpu"))
        with patch.object(CoquiTTS, "synthesize_file") as mock_synth:
            count = process_directory(tts, input_dir, verbose=False)

        assert count == 0
        mock_synth.assert_not_called()
        err = capsys.readouterr().err
        assert "Skipping 01.txt" in err
        assert "Skipping 02.txt" in err
        assert str(output_dir / "02.wav") in err

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Test a directory without text files."""
        tts = CoquiTTS(CoquiTTSConfig(device="cpu"))

        with pytest.raises(ValueError, match="No .txt files found"):
            process_directory(tts, tmp_path)
