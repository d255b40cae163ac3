"""Derivation of identifier forms from the raw answers."""

from __future__ import annotations

from .composition import analyze
from .models import RawAnswers, ResolvedAnswers


def resolve(raw: RawAnswers) -> ResolvedAnswers:
    """Compute every derived field of *raw*.

    Pure and total: empty optional answers yield empty derived values, which
    the templates treat as "feature absent".

    Example::

        resolve(RawAnswers(name="acme", platform_name="Acme", credential_name="Access Token"))
        # credential_name_upper_camel_case="AccessToken"
        # credential_name_snake_case="access_token"
        # credential_env_var_name="ACME_ACCESS_TOKEN"
        # field_name="Token"
    """
    composition = analyze(raw.example_credential) if raw.example_credential else None

    platform_identifier = raw.platform_name.replace(" ", "")

    tokens = raw.credential_name.split()
    snake_case = "_".join(tokens).lower()

    return ResolvedAnswers(
        **raw.model_dump(),
        value_composition=composition,
        platform_name_upper_camel_case=platform_identifier,
        credential_name_upper_camel_case="".join(tokens),
        credential_name_snake_case=snake_case,
        credential_env_var_name=f"{raw.name}_{snake_case}".upper(),
        # Placeholder: assume the field is the last word, e.g. "Token".
        field_name=tokens[-1] if tokens else "",
    )
