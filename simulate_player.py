"""Simulate a player finishing n-back sessions against a running server."""
import random
import requests

BASE_URL = 'http://localhost:5002'
TAGS = ['position', 'audio']
TRIALS = 40
MATCH_RATE = 0.25

session = requests.Session()


def play_trial(skill):
    """One trial: each tag is a target with MATCH_RATE, answered correctly with p=skill."""
    trial = {}
    for tag in TAGS:
        is_target = random.random() < MATCH_RATE
        correct = random.random() < skill
        if is_target:
            trial[tag] = 'hit' if correct else 'miss'
        else:
            trial[tag] = 'non-target' if correct else random.choice(['lure-fa', 'random-fa'])
    return trial


def main(games=15, skill=0.85):
    for i in range(games):
        settings = session.get(f'{BASE_URL}/game/settings').json()
        game_info = {
            'nBack': settings['nBack'],
            'levelProgress': settings['levelProgress'],
            'tags': TAGS,
            'mode': 'dual',
            'durationSeconds': TRIALS * settings['trialTime'] / 1000,
        }
        scoresheet = [play_trial(skill) for _ in range(TRIALS)]
        resp = session.post(f'{BASE_URL}/game/complete', json={
            'gameInfo': game_info,
            'scoresheet': scoresheet,
            'status': 'completed',
        })
        resp.raise_for_status()
        progression = resp.json()['progression'] or {}
        print(f"Game {i + 1}: n={settings['nBack']} p={settings['levelProgress']:.2f} "
              f"d'={progression.get('d_prime', 0):.2f} event={progression.get('event')}")

    summary = session.get(f'{BASE_URL}/dashboard/').json()
    print(f"Play time today: {summary['play_time']}")


if __name__ == '__main__':
    main()
