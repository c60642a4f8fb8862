import argparse

from ride_stats.src.data.loader import load_events
from ride_stats.src.reporting import summarize, print_report


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute fleet statistics from a vehicle-sharing event log.")
    parser.add_argument("events_file", nargs="?", default=None,
                        help="Event log to read (defaults to ride_stats/data/events.txt)")
    args = parser.parse_args(argv)

    events = load_events(args.events_file)
    print_report(summarize(events))


if __name__ == "__main__":
    main()
