from radiosonde_parser import gather_reports, parser, pq_conv, summary
from radiosonde_parser.tokenizer import split_message_parts
import json
import os
import re
import sys
import logging
import argparse
import requests
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

DEFAULT_OUTPUT_DIR = os.getenv('RADIOSONDE_OUTPUT_DIR', 'decoded_soundings')
DEFAULT_LOG_LEVEL = os.getenv('RADIOSONDE_LOG_LEVEL', 'WARNING')


def build_arg_parser():
    cli_parser = argparse.ArgumentParser(
        description='Decode TTAA/TTBB upper-air (radiosonde) reports from a bulletin file, a URL, or separate part files.',
        formatter_class=argparse.RawTextHelpFormatter
    )
    cli_parser.add_argument(
        '--local_file',
        type=str,
        help='Path to a local bulletin holding the TTAA part and optionally the TTBB part.\nExample: 03808.txt'
    )
    cli_parser.add_argument(
        '--url',
        type=str,
        help='URL of a bulletin holding the TTAA part and optionally the TTBB part.'
    )
    cli_parser.add_argument(
        '--ttaa_file',
        type=str,
        help='Path to a file holding only the TTAA part.'
    )
    cli_parser.add_argument(
        '--ttbb_file',
        type=str,
        help='Path to a file holding only the TTBB part (used with --ttaa_file).'
    )
    cli_parser.add_argument(
        '--output_dir',
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help=f'Directory to save decoded JSON and Parquet files. Will be created if it does not exist. Default: {DEFAULT_OUTPUT_DIR}'
    )
    cli_parser.add_argument(
        '--log_level',
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help=f'Logging level. Default: {DEFAULT_LOG_LEVEL}'
    )
    return cli_parser


def read_input(args):
    """Returns (ttaa_text, ttbb_text, source_name) for the given arguments, or None without input."""
    if args.local_file or args.url:
        content, filename = gather_reports.read_sounding_message(args.local_file or args.url)
        ttaa_text, ttbb_text = split_message_parts(content)
        return ttaa_text, ttbb_text, filename
    if args.ttaa_file:
        ttaa_text, filename = gather_reports.read_sounding_message(args.ttaa_file)
        ttbb_text = ''
        if args.ttbb_file:
            ttbb_text, _ = gather_reports.read_sounding_message(args.ttbb_file)
        return ttaa_text, ttbb_text, filename
    return None


def format_level(level):
    """One text line for a mandatory level; missing values print as '-'."""
    def show(value, unit=''):
        return '-' if value is None else f"{value}{unit}"

    compass = summary.cardinal_direction(level.wind_direction)
    wind = f"{show(level.wind_direction)}/{show(level.wind_speed, 'kt')}"
    if compass:
        wind += f" ({compass})"
    return (f"{level.pressure:>5} hPa  height {show(level.height, 'm')}  "
            f"temp {show(level.temperature, 'C')}  dewpoint {show(level.dewpoint, 'C')}  wind {wind}")


def print_mandatory_levels(profile):
    """Prints mandatory levels at or above 100 hPa and counts the ones left out."""
    shown, filtered = summary.split_mandatory_levels(profile.mandatory_levels)
    print("Mandatory levels:")
    for level in shown:
        print(f"  {format_level(level)}")
    if filtered:
        print(f"  ({len(filtered)} level(s) above the 100 hPa surface not shown)")


def save_profile(profile, output_dir):
    """Writes the profile as JSON and Parquet; returns the two paths."""
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
        print(f"Created output directory: {output_dir}")

    day = f"{profile.day:02d}" if profile.day is not None else "xx"
    hour = f"{profile.hour:02d}" if profile.hour is not None else "xx"
    sanitized_id = re.sub(r'[^\w\d\-\.]', '_', f"{profile.station or 'unknown'}-{day}{hour}")
    output_filename_json = os.path.join(output_dir, f"{sanitized_id}.json")
    output_filename_parquet = os.path.join(output_dir, f"{sanitized_id}.parquet")

    with open(output_filename_json, 'w') as f:
        json.dump(profile.to_dict(), f, indent=4)
    print(f"Decoded profile saved to: {output_filename_json}")

    pq_conv.write_parquet(profile, output_filename_parquet)
    print(f"Decoded profile saved to: {output_filename_parquet}")
    return output_filename_json, output_filename_parquet


def main(argv=None):
    cli_parser = build_arg_parser()
    args = cli_parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        message = read_input(args)
    except (FileNotFoundError, ValueError, requests.exceptions.RequestException) as e:
        print(f"Error: {e}")
        return 1

    if message is None:
        print("\nNo local file, URL, or TTAA file provided.")
        print("Please use --local_file <PATH>, --url <URL>, or --ttaa_file <PATH> [--ttbb_file <PATH>].")
        cli_parser.print_help()
        return 2

    ttaa_text, ttbb_text, source_name = message
    print(f"\n--- Decoding: {source_name} ---")
    result = parser.decode_sounding(ttaa_text, ttbb_text)

    for error in result.errors:
        print(f"Warning: {error}")

    if result.profile is None:
        return 1

    profile = result.profile
    print(f"Decoded profile:\n{json.dumps(profile.to_dict(), indent=4)}")
    print_mandatory_levels(profile)
    print(f"Significant level summary:\n{json.dumps(summary.summarize_significant_levels(profile), indent=4)}")

    save_profile(profile, args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
