"""
Commit Message Hook

Normalizes and validates commit messages from a git commit-msg hook.
"""

__version__ = "1.0.0"

# Allowed commit types - closed set, single source of truth.
# Order matters: header repair takes the first match.
COMMIT_TYPES = {
    'build': 'Build system or external dependency changes',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'ci': 'CI/CD configuration changes',
    'docs': 'Documentation only changes',
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'perf': 'Performance improvement',
    'refactor': 'Code restructuring without behavior change',
    'revert': 'Reverts a previous commit',
    'style': 'Formatting, whitespace, no code change',
    'test': 'Adding or updating tests',
}

# List of type names for validation and help text
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
