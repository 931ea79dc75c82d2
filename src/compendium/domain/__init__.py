"""Problem tracking domain: models, revision schedule and list derivations."""
