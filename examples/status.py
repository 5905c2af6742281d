# status.py

import argparse
from chalkee import blue, green, yellow, magenta, red, bg, as_, hex, configure_logging

def report(folder: str, photos: int, videos: int) -> None:
    """Print the kind of status lines an upload script produces."""
    print(blue("Starting upload process for folder: ").bold(folder))
    print(green(["Found ", " photos and ", " videos"], photos, videos))
    if not photos and not videos:
        print(yellow("No media files found in the specified folder"))
        return
    print(magenta("Waiting for upload to complete..."))
    print(bg.green("DONE").as_.white(f"{photos + videos} files"))
    print(as_.hex("#ff8800")("elapsed:").bold("12s"))
    print(red("Errors:").as_(0))

def main():
    parser = argparse.ArgumentParser(description='chalkee status demo')
    parser.add_argument('folder', nargs='?', default='./media')
    parser.add_argument('--photos', type=int, default=12)
    parser.add_argument('--videos', type=int, default=3)
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    args = parser.parse_args()

    if args.enable_logging:
        configure_logging(log_file=args.log_file)
    report(args.folder, args.photos, args.videos)

if __name__ == "__main__":
    main()
