#!/usr/bin/env python3
"""
Frame Trace Analyzer - Command Line Interface
"""

import json
import sys
from frame_analyzer import FrameAnalyzer
from frame_analyzer.core.types import MAX_FRAMES_TO_PROCESS
from frame_analyzer.processors import load_stat_definitions
from frame_analyzer.utils import configure_logging
from frame_analyzer.web import prepare_results


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(
        description='Analyze per-frame profiler CSV captures and summarize aggregate frame stats.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_frames.py capture.csv
  python analyze_frames.py capture.csv --max-frames 5000
  python analyze_frames.py capture.csv --stats stats.json -o results.json
        """
    )
    parser.add_argument('input_file', help='Path to the profiler CSV file')
    parser.add_argument('-o', '--output', dest='output_file', default=None,
                        help='Write the full results as JSON to this file')
    parser.add_argument('--max-frames', type=int, default=MAX_FRAMES_TO_PROCESS,
                        help='Maximum number of frames to process')
    parser.add_argument('--stats', dest='stats_file', default=None,
                        help='JSON file with aggregate stat definitions')
    parser.add_argument('--log-level', default=None, help='Logging level (default: INFO)')
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        stat_definitions = load_stat_definitions(args.stats_file) if args.stats_file else None
        analyzer = FrameAnalyzer(frame_limit=args.max_frames, stat_definitions=stat_definitions)

        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  Max frames: {args.max_frames}")
        print(f"  Stat definitions: {args.stats_file or 'built-in'}\n")

        if analyzer.process_trace_file(args.input_file) is None:
            return 0

        print()
        lines = analyzer.summary_lines()
        for line in lines:
            print(line)
        for warning in analyzer.warnings:
            if warning not in lines:
                print(warning)

        if args.output_file:
            with open(args.output_file, 'w', encoding='utf-8') as f:
                json.dump(prepare_results(analyzer), f, indent=2)
            print(f"\nResults written to {args.output_file}")

        print(f"\n✓ Analysis complete!")
    except FileNotFoundError as e:
        print(f"Error: File '{e.filename}' not found.")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
