"""Tests for the N5 Master console client."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from cli import __main__ as cli_main
from cli.console import ConsoleUI


def make_client():
    client = MagicMock()
    client.base_url = 'http://localhost:8000'
    client.user_id = 'yuki'
    client.health_check.return_value = {'service': 'n5master'}
    client.get_home.return_value = {
        'total_mastered': 0,
        'available': 40,
        'categories': [],
        'unlocked': [],
        'credential_invalid': False
    }
    return client


class TestConsoleUI(unittest.TestCase):

    def run_commands(self, client, commands):
        printed = []
        with patch('builtins.input', side_effect=commands), \
                patch('builtins.print', side_effect=lambda *args, **kw: printed.append(' '.join(map(str, args)))):
            ConsoleUI(client).run()
        return printed

    def test_request_errors_keep_the_menu_running(self):
        client = make_client()
        client.get_progress.side_effect = requests.ConnectionError('connection refused')
        client.search_vocabulary.side_effect = requests.ConnectionError('read timed out')
        client.search_grammar.return_value = {'total': 0, 'points': []}

        printed = self.run_commands(client, ['progress', 'vocab', 'water', 'grammar', '', 'exit'])

        self.assertIn('Error: connection refused', printed)
        self.assertIn('Error: read timed out', printed)
        client.search_vocabulary.assert_called_once_with('water')
        client.search_grammar.assert_called_once_with('')
        self.assertEqual(client.get_home.call_count, 4)

    def test_mnemonic_shows_study_guide(self):
        printed = []
        state = {
            'mnemonic': {
                'character': '一',
                'mnemonic': 'One stroke',
                'example_sentence': '一つください。',
                'translation': 'One, please.'
            },
            'hint_error': None,
            'study_guide': {
                'char': '一', 'romaji': 'ichi', 'meaning': 'one',
                'sino_vietnamese': 'NHẤT', 'onyomi': 'イチ', 'kunyomi': 'ひと',
                'example_vocab': '一つ (ひとつ) one thing',
                'lookup_url': 'https://jisho.org/search/%E4%B8%80%20%23kanji'
            }
        }
        with patch('builtins.print', side_effect=lambda *args, **kw: printed.append(' '.join(map(str, args)))):
            ConsoleUI(make_client()).print_mnemonic(state)
        self.assertIn('  Hán Việt: NHẤT', printed)
        self.assertIn('  Example: 一つ (ひとつ) one thing', printed)
        self.assertIn('  On: イチ  Kun: ひと', printed)


class TestMain(unittest.TestCase):

    def setUp(self):
        self.client = make_client()
        patcher = patch.object(cli_main, 'N5MasterAPIClient', return_value=self.client)
        self.client_class = patcher.start()
        self.addCleanup(patcher.stop)

    def test_list_users(self):
        self.client.list_users.return_value = ['default', 'yuki']
        with patch('builtins.print') as mock_print:
            with self.assertRaises(SystemExit) as cm:
                cli_main.main(['--list-users', '--server', 'http://example:9000'])
        self.assertEqual(cm.exception.code, 0)
        self.client_class.assert_called_once_with(base_url='http://example:9000', user_id='default')
        mock_print.assert_any_call('yuki')

    def test_reset_requires_confirmation(self):
        with patch('builtins.input', return_value='n'), patch('builtins.print'):
            with self.assertRaises(SystemExit) as cm:
                cli_main.main(['--reset', '--user', 'yuki'])
        self.assertEqual(cm.exception.code, 1)
        self.client.reset_progress.assert_not_called()

    def test_reset_confirmed(self):
        self.client.reset_progress.return_value = {'deleted': True}
        with patch('builtins.print') as mock_print:
            with self.assertRaises(SystemExit) as cm:
                cli_main.main(['--reset', '--yes', '--user', 'yuki'])
        self.assertEqual(cm.exception.code, 0)
        self.client.reset_progress.assert_called_once_with()
        mock_print.assert_any_call('Progress for "yuki" erased.')

    def test_server_errors_exit_nonzero(self):
        self.client.list_users.side_effect = requests.ConnectionError('connection refused')
        with patch('builtins.print') as mock_print:
            with self.assertRaises(SystemExit) as cm:
                cli_main.main(['--list-users'])
        self.assertEqual(cm.exception.code, 1)
        mock_print.assert_any_call('Error: connection refused')

    def test_list_and_reset_are_exclusive(self):
        with patch('sys.stderr'):
            with self.assertRaises(SystemExit) as cm:
                cli_main.main(['--list-users', '--reset'])
        self.assertEqual(cm.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
