"""Entry point for the N5 Master CLI client."""

import argparse
import sys

import requests

from cli.api_client import N5MasterAPIClient
from cli.console import ConsoleUI, error_detail


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m cli',
        description='N5 Master - JLPT N5 kana, kanji and vocabulary drills'
    )
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='Learner whose progress is drilled (default: default)'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--list-users',
        action='store_true',
        help='Print the learners with stored progress and exit'
    )
    mode.add_argument(
        '--reset',
        action='store_true',
        help="Erase the learner's stored progress and exit"
    )
    parser.add_argument(
        '--yes',
        action='store_true',
        help='Do not ask for confirmation with --reset'
    )
    return parser


def list_users(client: N5MasterAPIClient) -> int:
    users = client.list_users()
    if not users:
        print('No stored progress yet.')
    for user_id in users:
        print(user_id)
    return 0


def reset_progress(client: N5MasterAPIClient, confirmed: bool = False) -> int:
    if not confirmed:
        answer = input(f'Erase all progress for "{client.user_id}"? [y/N] ').strip().lower()
        if answer not in ('y', 'yes'):
            print('Nothing erased.')
            return 1
    result = client.reset_progress()
    if result['deleted']:
        print(f'Progress for "{client.user_id}" erased.')
    else:
        print(f'No stored progress for "{client.user_id}".')
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    client = N5MasterAPIClient(base_url=args.server, user_id=args.user)

    try:
        if args.list_users:
            sys.exit(list_users(client))
        if args.reset:
            sys.exit(reset_progress(client, confirmed=args.yes))
        ConsoleUI(client).run()
    except requests.RequestException as e:
        print(f'Error: {error_detail(e)}')
        sys.exit(1)
    except KeyboardInterrupt:
        print('\nさようなら!')
        sys.exit(0)


if __name__ == '__main__':
    main()
