"""CLI entry point for watson_clients package."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import credentials_from_env
from .errors import WatsonClientError
from .natural_language_understanding import (
    AnalyzeOptions,
    CategoriesOptions,
    ConceptsOptions,
    DeleteModelOptions,
    EmotionOptions,
    EntitiesOptions,
    Features,
    KeywordsOptions,
    MetadataOptions,
    NaturalLanguageUnderstanding,
    RelationsOptions,
    SemanticRolesOptions,
    SentimentOptions,
)
from .personality_insights import Content, ContentType, PersonalityInsights, ProfileOptions
from .utils import is_json_media_type

DEFAULT_VERSION_DATE = "2018-03-16"

FEATURE_OPTIONS = {
    "categories": CategoriesOptions,
    "concepts": ConceptsOptions,
    "emotion": EmotionOptions,
    "entities": EntitiesOptions,
    "keywords": KeywordsOptions,
    "metadata": MetadataOptions,
    "relations": RelationsOptions,
    "semantic_roles": SemanticRolesOptions,
    "sentiment": SentimentOptions,
}

_CONTENT_TYPES_BY_SUFFIX = {
    ".json": ContentType.APPLICATION_JSON,
    ".html": ContentType.TEXT_HTML,
    ".htm": ContentType.TEXT_HTML,
}


def _echo_model(result) -> None:
    click.echo(json.dumps(result.model_dump(mode="json", exclude_none=True), indent=2))


def _run(call):
    try:
        return call.execute()
    except WatsonClientError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--version-date",
    envvar="WATSON_VERSION_DATE",
    default=DEFAULT_VERSION_DATE,
    show_default=True,
    help="API version date (yyyy-MM-dd) sent with every request.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log outgoing requests.")
@click.pass_context
def main(ctx: click.Context, version_date: str, verbose: bool) -> None:
    """Watson text analysis and personality profiling from the command line.

    Credentials are read from <SERVICE>_USERNAME / <SERVICE>_PASSWORD or
    <SERVICE>_IAM_ACCESS_TOKEN (a .env file is honoured).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["version_date"] = version_date


def _nlu(ctx: click.Context) -> NaturalLanguageUnderstanding:
    try:
        return NaturalLanguageUnderstanding(
            ctx.obj["version_date"],
            **credentials_from_env(NaturalLanguageUnderstanding.SERVICE_NAME),
        )
    except WatsonClientError as e:
        raise click.ClickException(str(e)) from e


def _personality(ctx: click.Context) -> PersonalityInsights:
    try:
        return PersonalityInsights(
            ctx.obj["version_date"],
            **credentials_from_env(PersonalityInsights.SERVICE_NAME),
        )
    except WatsonClientError as e:
        raise click.ClickException(str(e)) from e


@main.command("analyze")
@click.option("--text", help="Plain text to analyze.")
@click.option("--html", help="HTML to analyze.")
@click.option("--url", help="Public webpage to analyze.")
@click.option(
    "--feature",
    "-f",
    "features",
    multiple=True,
    required=True,
    type=click.Choice(sorted(FEATURE_OPTIONS)),
    help="Feature to run (repeatable).",
)
@click.option("--language", help="ISO 639-1 code; skips language detection.")
@click.option("--limit-text-characters", type=int, help="Analyze at most this many characters.")
@click.option("--return-analyzed-text", is_flag=True, help="Echo the analyzed text.")
@click.pass_context
def analyze_cmd(
    ctx: click.Context,
    text: Optional[str],
    html: Optional[str],
    url: Optional[str],
    features: Tuple[str, ...],
    language: Optional[str],
    limit_text_characters: Optional[int],
    return_analyzed_text: bool,
) -> None:
    """Analyze TEXT, HTML or a URL with one or more features."""
    if not any((text, html, url)):
        raise click.UsageError("one of --text, --html or --url is required")
    options = AnalyzeOptions(
        text=text,
        html=html,
        url=url,
        features=Features(**{name: FEATURE_OPTIONS[name]() for name in features}),
        language=language,
        limit_text_characters=limit_text_characters,
        return_analyzed_text=return_analyzed_text or None,
    )
    _echo_model(_run(_nlu(ctx).analyze(options)))


@main.command("list-models")
@click.pass_context
def list_models_cmd(ctx: click.Context) -> None:
    """List custom models linked to the service."""
    _echo_model(_run(_nlu(ctx).list_models()))


@main.command("delete-model")
@click.argument("model_id")
@click.pass_context
def delete_model_cmd(ctx: click.Context, model_id: str) -> None:
    """Delete the custom model MODEL_ID."""
    _run(_nlu(ctx).delete_model(DeleteModelOptions(model_id=model_id)))
    click.echo(f"Deleted model {model_id}")


@main.command("profile")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--content-type", help="Defaults from the file suffix (.json, .html, else text/plain).")
@click.option("--content-language", help="Language of the input (ar, en, es, ja, ko).")
@click.option("--accept-language", help="Language of the response labels.")
@click.option("--raw-scores", is_flag=True, help="Include raw scores.")
@click.option("--consumption-preferences", is_flag=True, help="Include consumption preferences.")
@click.option("--csv", "as_csv", is_flag=True, help="Print the profile as CSV.")
@click.option("--csv-headers", is_flag=True, help="Include the CSV header row (with --csv).")
@click.pass_context
def profile_cmd(
    ctx: click.Context,
    file: Path,
    content_type: Optional[str],
    content_language: Optional[str],
    accept_language: Optional[str],
    raw_scores: bool,
    consumption_preferences: bool,
    as_csv: bool,
    csv_headers: bool,
) -> None:
    """Generate a personality profile from FILE."""
    content_type = content_type or _CONTENT_TYPES_BY_SUFFIX.get(
        file.suffix.lower(), ContentType.TEXT_PLAIN
    )
    raw = file.read_text(encoding="utf-8")
    if is_json_media_type(content_type):
        try:
            payload = dict(content=Content.model_validate(json.loads(raw)))
        except ValueError as e:
            raise click.BadParameter(f"{file} is not valid content JSON: {e}") from e
    else:
        payload = dict(body=raw)
    options = ProfileOptions(
        content_type=content_type,
        content_language=content_language,
        accept_language=accept_language,
        raw_scores=raw_scores or None,
        consumption_preferences=consumption_preferences or None,
        **payload,
    )
    service = _personality(ctx)
    if as_csv:
        click.echo(_run(service.profile_as_csv(options, include_headers=csv_headers)))
    else:
        _echo_model(_run(service.profile(options)))


if __name__ == "__main__":
    main()
