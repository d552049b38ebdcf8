import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("STRIPE_SETTINGS__SECRET_KEY", "sk_test_dummy")
