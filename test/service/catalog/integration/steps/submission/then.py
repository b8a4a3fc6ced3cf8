from typing import Any

from fastapi.testclient import TestClient
from pytest_bdd import parsers, then

from src.platform.constant.route_constant import VENUE_BASE


@then(parsers.parse('the submission should finish with status {status_code:d}'))
def submission_status(submission_context: dict[str, Any], status_code: int) -> None:
    response = submission_context['response']
    assert response.status_code == status_code, response.text


@then(parsers.parse('the notification should be "{notification}"'))
def notification_is(submission_context: dict[str, Any], notification: str) -> None:
    assert submission_context['response'].json()['notification'] == notification


@then(parsers.parse('the venue should have {count:d} media urls in staged order'))
def venue_media_urls(submission_context: dict[str, Any], count: int) -> None:
    urls = submission_context['response'].json()['venue']['media_urls']
    staged = [filename for filename, _, _ in submission_context['media']]

    assert len(urls) == count
    for url, filename in zip(urls, staged):
        assert url.endswith(filename[filename.rindex('.'):])


@then(parsers.parse('the field "{field}" should be reported'))
def field_reported(submission_context: dict[str, Any], field: str) -> None:
    violations = submission_context['response'].json()['violations']
    assert field in {v['field'] for v in violations}


@then(parsers.parse('the venue "{name}" should be listed'))
def venue_listed(client: TestClient, name: str) -> None:
    assert name in [v['name'] for v in client.get(VENUE_BASE).json()]


@then('no venue should be listed')
def no_venue_listed(client: TestClient) -> None:
    assert client.get(VENUE_BASE, params={'refresh': True}).json() == []
