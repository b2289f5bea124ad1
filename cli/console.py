"""Console UI for N5 Master."""

import time

import requests

from core.classifier import COMPLETED, NOT_STARTED
from core.config import CHARACTER_CATEGORIES, GENERAL, MASTERY_THRESHOLD
from core.evaluator import INVALID_CREDENTIAL
from cli.api_client import N5MasterAPIClient

HINT_POLL_INTERVAL = 0.5
HINT_POLL_LIMIT = 60


def error_detail(error: Exception) -> str:
    """Pull the server's error message out of an HTTP error, if there is one."""
    if isinstance(error, requests.HTTPError) and error.response is not None:
        try:
            return error.response.json().get('detail', str(error))
        except ValueError:
            pass
    return str(error)


class ConsoleUI:
    """Console user interface for N5 Master."""

    def __init__(self, client: N5MasterAPIClient):
        self.client = client

    def print_home(self, home: dict):
        print('\n' + '=' * 50)
        print(f'N5 MASTER  |  Mastered: {home["total_mastered"]}  |  Available: {home["available"]}')
        print('=' * 50)
        for i, summary in enumerate(home['categories'], start=1):
            print(f'  {i}. {summary["category"].capitalize():<12} '
                  f'{summary["mastered"]:>3}/{summary["total"]:<3} mastered  '
                  f'({summary["discovered"]} discovered)')
        for item in home['unlocked']:
            print(f'\n  *** New {item["category"]} unlocked: {item["char"]} ***')
        if home['credential_invalid']:
            print('\n  Hints are disabled: the Gemini API key is missing or invalid. Use "key" to set one.')
        print('-' * 50)
        print('Commands: 1-4 category quiz, "all" general quiz, "review" mistakes,')
        print('          "progress", "vocab", "grammar", "key", "exit"')

    def print_progress(self, overview: dict):
        print('\n' + '=' * 50)
        print(f'PROGRESS  (mastery at {overview["mastery_threshold"]} correct answers)')
        print('=' * 50)
        for script in overview['scripts']:
            print(f'\n{script["category"].upper()}: {script["mastered"]} mastered, '
                  f'{script["in_progress"]} in progress, {script["advanced"]} advanced')
            for section in script['subsections']:
                started = [
                    f'{item["char"]}({item["success_count"]})'
                    for item in section['items'] if item['status'] != NOT_STARTED
                ]
                print(f'  {section["name"]}: {" ".join(started) if started else "-"}')
        print('\n' + '=' * 50 + '\n')

    def print_vocabulary(self, result: dict):
        print(f'\n{result["total"]} words')
        for item in result['items']:
            marker = '*' if item['status'] == COMPLETED else ' '
            print(f' {marker} {item["char"]:<8} {item["romaji"]:<14} {item["meaning"]}')

    def print_grammar(self, result: dict):
        print(f'\n{result["total"]} grammar points')
        for point in result['points']:
            print('-' * 40)
            print(f'{point["title"]}  [{point["structure"]}]')
            print(f'  {point["explanation"]}')
            print(f'  {point["example_jp"]}')
            print(f'  {point["example_en"]}')

    def print_study_guide(self, guide: dict):
        print(f'  {guide["char"]} ({guide["romaji"]})')
        if guide['meaning']:
            print(f'  Meaning: {guide["meaning"]}')
        if guide['sino_vietnamese']:
            print(f'  Hán Việt: {guide["sino_vietnamese"]}')
        if guide['onyomi'] or guide['kunyomi']:
            print(f'  On: {guide["onyomi"] or "-"}  Kun: {guide["kunyomi"] or "-"}')
        if guide['example_vocab']:
            print(f'  Example: {guide["example_vocab"]}')
        print(f'  Dictionary: {guide["lookup_url"]}')

    def browse(self, kind: str, query: str):
        """Search vocabulary or grammar and print the matches."""
        try:
            if kind == 'vocab':
                self.print_vocabulary(self.client.search_vocabulary(query))
            else:
                self.print_grammar(self.client.search_grammar(query))
        except requests.RequestException as e:
            print(f'Error: {error_detail(e)}')

    def print_question(self, state: dict):
        question = state['question']
        label = 'REVIEW' if state['review_mode'] else state['target'].upper()
        print('\n' + '-' * 40)
        print(f'{label}  Question {state["current_index"] + 1}/{state["total"]}  Score: {state["score"]}')
        print(f'\n      {question["char"]}\n')
        for i, option in enumerate(state['options'], start=1):
            print(f'  {i}. {option}')

    def print_mnemonic(self, state: dict):
        if state['mnemonic']:
            mnemonic = state['mnemonic']
            print('\n--- MNEMONIC ---')
            print(f'  {mnemonic["character"]}: {mnemonic["mnemonic"]}')
            print(f'  {mnemonic["example_sentence"]}')
            print(f'  {mnemonic["translation"]}')
            if state.get('study_guide'):
                self.print_study_guide(state['study_guide'])
            print('----------------')
        elif state['hint_error'] == INVALID_CREDENTIAL:
            print('Hints disabled: the Gemini API key is missing or invalid. Use "key" from the menu.')
        elif state['hint_error']:
            print('Could not generate a mnemonic for this one.')

    def wait_for_hint(self) -> dict:
        """Poll the quiz until the pending mnemonic arrives (or fails)."""
        print('Thinking of a mnemonic...')
        state = self.client.get_quiz()
        for _ in range(HINT_POLL_LIMIT):
            if not state['is_processing']:
                break
            time.sleep(HINT_POLL_INTERVAL)
            state = self.client.get_quiz()
        return state

    def read_answer(self, options: list[str]) -> str | None:
        """Read an option number or literal answer. Returns None to quit the quiz."""
        while True:
            user_input = input('==> ').strip()
            if user_input.lower() in ('q', 'quit'):
                return None
            if user_input.isdigit() and 1 <= int(user_input) <= len(options):
                return options[int(user_input) - 1]
            if user_input:
                return user_input

    def run_quiz(self, target: str, review: bool = False):
        try:
            state = self.client.start_quiz(target, review)
        except requests.RequestException as e:
            print(f'Error: {error_detail(e)}')
            return

        print('Pick an option number ("q" to quit)')
        while not state['completed']:
            self.print_question(state)
            answer = self.read_answer(state['options'])
            if answer is None:
                self.client.abandon_quiz()
                print('Quiz abandoned.')
                return

            try:
                result = self.client.submit_answer(answer)
            except requests.RequestException as e:
                print(f'Error submitting answer: {error_detail(e)}')
                continue

            if result['is_correct']:
                print(f'Correct! ({result["success_count"]}/{MASTERY_THRESHOLD})')
                if result['newly_mastered']:
                    print('*** MASTERED! ***')
            else:
                print(f'Wrong. Answer: {result["expected"]}')
                if result['hint_pending']:
                    self.print_mnemonic(self.wait_for_hint())

            input('(Enter to continue)')
            state = self.client.next_question()

        summary = self.client.get_summary()
        print('\n' + '=' * 40)
        print(f'Finished: {summary["score"]}/{summary["total"]}')
        if summary['missed_items']:
            print('To practice: ' + ', '.join(item['char'] for item in summary['missed_items']))
        print('=' * 40)

    def run(self):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to N5 Master server ({health['service']})")
        except requests.RequestException:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        while True:
            try:
                self.print_home(self.client.get_home())
            except requests.RequestException as e:
                print(f'Error loading home: {error_detail(e)}')
                return

            command = input('==> ').strip().lower()

            if command == 'exit':
                print('さようなら!')
                return

            elif command.isdigit() and 1 <= int(command) <= len(CHARACTER_CATEGORIES):
                self.run_quiz(CHARACTER_CATEGORIES[int(command) - 1])

            elif command == 'all':
                self.run_quiz(GENERAL)

            elif command == 'review':
                target = input(f'Review which? ({", ".join(CHARACTER_CATEGORIES)}, all): ').strip().lower()
                self.run_quiz(GENERAL if target == 'all' else target, review=True)

            elif command == 'progress':
                try:
                    self.print_progress(self.client.get_progress())
                except requests.RequestException as e:
                    print(f'Error: {error_detail(e)}')

            elif command in ('vocab', 'grammar'):
                self.browse(command, input('Search: ').strip())

            elif command == 'key':
                api_key = input('Gemini API key: ').strip()
                try:
                    self.client.set_api_key(api_key)
                    print('API key updated.')
                except requests.RequestException as e:
                    print(f'Error: {error_detail(e)}')
