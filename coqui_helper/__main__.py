"""CLI for Coqui Helper - run the Coqui `tts` command with presets and retries.

Usage:
    python -m coqui_helper "Hello world" --output hello.wav
    python -m coqui_helper --input chapters/ --model tts_models/de/thorsten/vits
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm

from .catalog import get_models, model_display_name
from .coqui_tts import CoquiTTS, CoquiTTSConfig
from .dataset import get_categories

# CLI option name -> CoquiTTSConfig field
_CONFIG_OVERRIDES: dict[str, str] = {
    "model": "model",
    "model_path": "model_path",
    "language": "language",
    "vocoder": "vocoder",
    "voice_conversion": "voice_conversion",
    "speaker": "speaker",
    "speaker_wav": "speaker_wav",
    "speaker_idx": "speaker_idx",
    "device": "device",
    "output_dir": "output_dir",
    "max_retries": "max_retries",
    "command": "command",
}


def load_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from JSON file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    with config_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def create_default_config() -> dict[str, Any]:
    """Create default configuration dictionary."""
    return CoquiTTSConfig().to_dict()


def build_config(
    args: argparse.Namespace, config: dict[str, Any] | None = None
) -> CoquiTTSConfig:
    """Merge a configuration dictionary with command-line overrides.

    Options given on the command line win over the configuration file.
    """
    merged = dict(config or {})
    for option, field_name in _CONFIG_OVERRIDES.items():
        value = getattr(args, option, None)
        if value is not None:
            merged[field_name] = value
    if args.verbose:
        merged["verbose"] = True
    return CoquiTTSConfig.from_dict(merged)


def list_models(category: str | None) -> None:
    """Print preset model names, optionally for one category."""
    for model in get_models(category):
        flags = []
        if model.is_multilingual():
            flags.append(f"{len(model.supported_languages)} languages")
        if model.supports_voice_cloning():
            flags.append("voice cloning")
        suffix = f"  ({', '.join(flags)})" if flags else ""
        print(f"{model_display_name(model)}{suffix}")


def process_directory(
    tts: CoquiTTS,
    input_dir: Path,
    verbose: bool = False,
) -> int:
    """Synthesize every .txt file in a directory into <stem>.wav files.

    Files whose output already exists are not synthesized; each one is
    reported on stderr.

    Returns:
        Number of files synthesized
    """
    txt_files = sorted(input_dir.glob("*.txt"))
    if not txt_files:
        raise ValueError(f"No .txt files found in: {input_dir}")

    files_to_process = []
    for txt_file in txt_files:
        output_name = f"{txt_file.stem}.wav"
        output_path = tts.resolve_output_path(output_name)
        if output_path.exists():
            print(
                f"Skipping {txt_file.name}: audio file already exists: {output_path}",
                file=sys.stderr,
            )
        else:
            files_to_process.append((txt_file, output_name))

    if not files_to_process:
        print("All files already processed!")
        return 0

    if verbose:
        for i, (input_file, output_name) in enumerate(files_to_process, 1):
            print(f"\n[{i}/{len(files_to_process)}] Processing: {input_file.name}")
            tts.synthesize_file(input_file, output_name)
    else:
        file_progress = tqdm(files_to_process, desc="Files", unit="file")
        for input_file, output_name in file_progress:
            file_progress.set_description(f"Files [{input_file.name}]")
            tts.synthesize_file(input_file, output_name)

    return len(files_to_process)


def _add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to synthesize",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        help="Text file, or directory of .txt files, to synthesize",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output WAV file, relative to the output directory",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="JSON configuration file",
    )
    parser.add_argument(
        "--create-config",
        action="store_true",
        help="Create a default configuration file (config.json) and exit",
    )
    parser.add_argument(
        "--list-models",
        nargs="?",
        const="all",
        choices=["all", *get_categories()],
        help="List preset models (optionally one category) and exit",
    )
    parser.add_argument(
        "--print-args",
        action="store_true",
        help="Print the tts command line instead of running it",
    )

    model_group = parser.add_argument_group("model selection")
    model_group.add_argument("-m", "--model", help="Full Coqui model name")
    model_group.add_argument("--model-path", help="Path to a local model file")
    model_group.add_argument("--vocoder", help="Full Coqui vocoder name")
    model_group.add_argument(
        "--voice-conversion", help="Full Coqui voice conversion model name"
    )
    model_group.add_argument("-l", "--language", help="Synthesis language (e.g. en, de)")

    speaker_group = parser.add_argument_group("speaker")
    speaker_group.add_argument(
        "-s", "--speaker", help="Speaker sample file or speaker index"
    )
    speaker_group.add_argument("--speaker-wav", help="Speaker sample for voice cloning")
    speaker_group.add_argument("--speaker-idx", help="Speaker index (e.g. p225)")

    runtime_group = parser.add_argument_group("runtime")
    runtime_group.add_argument(
        "-d",
        "--device",
        choices=["auto", "cpu", "cuda", "mps"],
        help="Compute device (default: auto)",
    )
    runtime_group.add_argument("--output-dir", help="Directory for generated audio")
    runtime_group.add_argument(
        "--max-retries", type=int, help="Maximum synthesis attempts (default: 3)"
    )
    runtime_group.add_argument("--command", help="tts executable (default: tts)")
    runtime_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print verbose progress information",
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="coqui-helper",
        description="Coqui Helper - run Coqui TTS models with presets and retries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Synthesize text with the default model (XTTS v2)
  coqui-helper "Hello world" --output hello.wav --speaker voice.wav

  # Use a single-speaker German model on the CPU
  coqui-helper "Guten Tag" -o tag.wav -m tts_models/de/thorsten/vits -d cpu

  # Synthesize every .txt file in a directory
  coqui-helper --input chapters/ --output-dir audio/

  # Show the command that would run
  coqui-helper "Hello" -o hello.wav --print-args

  # List models
  coqui-helper --list-models vocoder_models
        """,
    )
    _add_arguments(parser)
    args = parser.parse_args(argv)

    if args.create_config:
        config_path = Path("config.json")
        with config_path.open("w", encoding="utf-8") as f:
            json.dump(create_default_config(), f, indent=2)
        print(f"Created default configuration: {config_path}")
        sys.exit(0)

    if args.list_models:
        list_models(None if args.list_models == "all" else args.list_models)
        sys.exit(0)

    if args.text is None and args.input is None:
        parser.error("text or --input is required")
    if args.text is not None and args.input is not None:
        parser.error("give either text or --input, not both")

    config: dict[str, Any] = {}
    if args.config:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            sys.exit(1)
        try:
            config = load_config(args.config)
        except json.JSONDecodeError as e:
            print(f"Error: Invalid JSON in config file: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        tts = CoquiTTS(build_config(args, config))

        if args.input is not None and args.input.is_dir():
            if args.print_args:
                for txt_file in sorted(args.input.glob("*.txt")):
                    text = txt_file.read_text(encoding="utf-8")
                    print(" ".join(tts.command_line(text, f"{txt_file.stem}.wav")))
                return
            count = process_directory(tts, args.input, verbose=args.verbose)
            print(f"Synthesized {count} file(s) into {tts.settings.output_dir}")
            return

        if args.output is None:
            parser.error("--output is required")

        if args.print_args:
            text = args.text if args.text is not None else args.input.read_text(
                encoding="utf-8"
            )
            print(" ".join(tts.command_line(text, args.output)))
            return

        if args.input is not None:
            output = tts.synthesize_file(args.input, args.output)
        else:
            output = tts.synthesize_to_file(args.text, args.output)

        if args.verbose and output:
            print(output)
        print(f"Saved audio to {tts.resolve_output_path(args.output)}")

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
