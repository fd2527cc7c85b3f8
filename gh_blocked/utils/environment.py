"""Detection of continuous-integration environments."""

import os
from collections.abc import Mapping

# Provider name -> environment variable that provider always sets
CI_PROVIDERS: dict[str, str] = {
    "GitHub Actions": "GITHUB_ACTIONS",
    "GitLab CI": "GITLAB_CI",
    "Travis CI": "TRAVIS",
    "CircleCI": "CIRCLECI",
    "Jenkins": "JENKINS_URL",
    "Azure Pipelines": "TF_BUILD",
    "Buildkite": "BUILDKITE",
    "AppVeyor": "APPVEYOR",
    "TeamCity": "TEAMCITY_VERSION",
    "Drone": "DRONE",
    "AWS CodeBuild": "CODEBUILD_BUILD_ID",
    "Bitbucket Pipelines": "BITBUCKET_BUILD_NUMBER",
}

GENERIC_CI_VARS = ("CI", "CONTINUOUS_INTEGRATION", "BUILD_NUMBER")

FALSE_VALUES = {"", "0", "false", "no", "off"}


def _is_set(environ: Mapping[str, str], name: str) -> bool:
    value = environ.get(name)
    return value is not None and value.strip().lower() not in FALSE_VALUES


def detect_ci(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the name of the CI provider we are running under, if any.

    Args:
        environ: Environment to inspect. Defaults to ``os.environ``.

    Returns:
        Provider name, ``"generic"`` when only a generic ``CI`` flag is set,
        or None outside CI.
    """
    if environ is None:
        environ = os.environ

    for provider, variable in CI_PROVIDERS.items():
        if _is_set(environ, variable):
            return provider

    if any(_is_set(environ, variable) for variable in GENERIC_CI_VARS):
        return "generic"
    return None
