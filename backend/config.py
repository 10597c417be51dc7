import os

DEFAULT_CHALLENGES = [
    'the quick brown fox jumps over the lazy dog',
    'hello world',
    'pack my box with five dozen liquor jugs',
    'sphinx of black quartz judge my vow',
    'how vexingly quick daft zebras jump',
    'a journey of a thousand miles begins with a single step',
    'practice makes perfect',
    'the early bird catches the worm',
]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Challenge corpus; a file (one challenge per line) overrides the list
    CHALLENGE_CORPUS = list(DEFAULT_CHALLENGES)
    CHALLENGE_CORPUS_FILE = os.environ.get('CHALLENGE_CORPUS_FILE')
    # Pause between a winner and the next round (ms)
    RESET_DELAY_MS = int(os.environ.get('RESET_DELAY_MS', '5000'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
