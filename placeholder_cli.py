#!/usr/bin/env python3
"""
CLI for the placeholder image generator.

Renders placeholder images to disk or runs the HTTP server.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from api.dependencies import get_placeholder_service
from config.settings import settings
from utils.image_utils import get_image_info

logger = logging.getLogger(__name__)


def render_cli(
    size_and_format: str,
    output: str,
    text: str = None,
    background_color: str = None,
    text_color: str = None
) -> int:
    """Render one placeholder image to a file. Returns the exit code."""
    service = get_placeholder_service()

    if text_color is not None:
        background = background_color or service.config.default_background_color
        outcome = service.generate_with_colors(size_and_format, text, background, text_color)
    elif background_color is not None:
        outcome = service.generate_with_background(size_and_format, text, background_color)
    else:
        outcome = service.generate(size_and_format, text)

    if not outcome.is_success:
        print(f"Error: {outcome.message}", file=sys.stderr)
        return 2 if not outcome.is_internal_failure else 1

    output_path = Path(output)
    output_path.write_bytes(outcome.result.image_bytes)

    width, height, image_format = get_image_info(outcome.result.image_bytes)
    print(f"Saved {width}x{height} {image_format} ({len(outcome.result.image_bytes)} bytes) to {output_path}")
    return 0


def serve_cli(host: str, port: int):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    logger.info("Starting placeholder API on %s:%d", host, port)
    uvicorn.run("serving.placeholder_api:app", host=host, port=port, log_level=settings.log_level.lower())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Placeholder image generator'
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a placeholder image to a file')
    render_parser.add_argument('size', type=str, help='Size and format, e.g. 640x480.png')
    render_parser.add_argument('-o', '--output', type=str, required=True, help='Output file path')
    render_parser.add_argument('--text', type=str, default=None, help='Overlay text')
    render_parser.add_argument('--background', type=str, default=None, help='Background color name or hex')
    render_parser.add_argument('--text-color', type=str, default=None, help='Text color name or hex')

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', type=str, default=settings.api_host, help='Bind address')
    serve_parser.add_argument('--port', type=int, default=settings.api_port, help='Bind port')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command == 'render':
        return render_cli(
            size_and_format=args.size,
            output=args.output,
            text=args.text,
            background_color=args.background,
            text_color=args.text_color
        )
    elif args.command == 'serve':
        serve_cli(args.host, args.port)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
