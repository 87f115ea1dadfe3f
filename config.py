import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Upper bound on seconds simulated per request (admission control)
    MAX_TIME_LIMIT = int(os.environ.get('MAX_TIME_LIMIT', '86400'))
    # Upper bound on spans returned by a counting request
    MAX_TIME_SPANS = int(os.environ.get('MAX_TIME_SPANS', '1440'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
