"""Waybar weather module: prints one JSON line with the weather for a location."""
import argparse
import logging
import os
import sys
from typing import Optional, Tuple

from dotenv import load_dotenv

from weather_layout import serialize_output
from weather_provider import WeatherProviderError
from weather_service import WeatherService
from wttr_provider import WttrProvider

USAGE_ERROR = 'Error: City location is required. Usage: waybar-weather "City, Country"'


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("waybar-weather", description="Weather summary for Waybar")
    parser.add_argument("location", nargs="?", help='Location, e.g. "Paris, France"')
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.location is None:
        parser.error(USAGE_ERROR)
    return args


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # stdout is reserved for the JSON line; quiet runs leave stderr to the exit message
    log_level = logging.DEBUG if verbose else logging.WARNING
    stream_handler = logging.StreamHandler(sys.stderr)
    if not verbose:
        stream_handler.setLevel(logging.CRITICAL)
    handlers = [stream_handler]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config(timeout: Optional[float]) -> Tuple[str, float]:
    load_dotenv()
    host = os.getenv("WTTR_HOST", WttrProvider.DEFAULT_HOST)

    if timeout is None:
        try:
            timeout = float(os.getenv("WTTR_TIMEOUT", "10"))
        except ValueError as exc:
            raise SystemExit(f"Invalid WTTR_TIMEOUT: {exc}") from exc

    logging.info("Configuration loaded: host=%s timeout=%s", host, timeout)
    return host, timeout


def build_weather_service(host: str, timeout: float) -> WeatherService:
    provider = WttrProvider(host=host, timeout=timeout)
    return WeatherService(provider=provider)


def write_output(line: str) -> None:
    """Print the JSON line to stdout as UTF-8 whatever the locale."""
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    print(line)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    host, timeout = load_config(args.timeout)
    service = build_weather_service(host, timeout)

    try:
        output = service.get_display(args.location)
    except WeatherProviderError as err:
        logging.error("Weather fetch failed: %s", err)
        raise SystemExit(f"Error: {err}") from err

    write_output(serialize_output(output))


if __name__ == "__main__":
    main()
