"""BDD steps for the concert ticket lifecycle over the HTTP API.

Steps share one `context` dict per scenario:
    - context['response']:  last httpx.Response
    - context['ticket_id']: id of the ticket the scenario works on
"""

from typing import Any

from fastapi.testclient import TestClient
import httpx
import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from src.platform.constant.route_constant import (
    TICKET_BOOK,
    TICKET_CREATE,
    TICKET_DELETE,
    TICKET_GET,
    TICKET_UPDATE,
)


scenarios('ticket_lifecycle.feature')


@pytest.fixture
def context() -> dict[str, Any]:
    return {}


def _ticket_body(concert_name: str, seat_number: str, price: float) -> dict[str, Any]:
    return {'concert_name': concert_name, 'seat_number': seat_number, 'price': price}


# ============ Given Steps ============


@given(parsers.parse('a ticket for "{concert_name}" seat "{seat_number}" at {price:f} exists'))
def given_ticket_exists(
    concert_name: str,
    seat_number: str,
    price: float,
    client: TestClient,
    context: dict[str, Any],
) -> None:
    response = client.post(TICKET_CREATE, json=_ticket_body(concert_name, seat_number, price))
    assert response.status_code == 201, response.text
    context['ticket_id'] = response.json()['id']


@given('the ticket is booked')
def given_ticket_booked(client: TestClient, context: dict[str, Any]) -> None:
    response = client.post(TICKET_BOOK.format(ticket_id=context['ticket_id']))
    assert response.status_code == 200, response.text


# ============ When Steps ============


@when(parsers.parse('I create a ticket for "{concert_name}" seat "{seat_number}" at {price:f}'))
def when_create_ticket(
    concert_name: str,
    seat_number: str,
    price: float,
    client: TestClient,
    context: dict[str, Any],
) -> None:
    response = client.post(TICKET_CREATE, json=_ticket_body(concert_name, seat_number, price))
    context['response'] = response
    if response.status_code == 201:
        context['ticket_id'] = response.json()['id']


@when(parsers.parse('I update the ticket to "{concert_name}" seat "{seat_number}" at {price:f}'))
def when_update_ticket(
    concert_name: str,
    seat_number: str,
    price: float,
    client: TestClient,
    context: dict[str, Any],
) -> None:
    context['response'] = client.put(
        TICKET_UPDATE.format(ticket_id=context['ticket_id']),
        json=_ticket_body(concert_name, seat_number, price),
    )


@when('I get the ticket')
def when_get_ticket(client: TestClient, context: dict[str, Any]) -> None:
    context['response'] = client.get(TICKET_GET.format(ticket_id=context['ticket_id']))


@when('I book the ticket')
def when_book_ticket(client: TestClient, context: dict[str, Any]) -> None:
    context['response'] = client.post(TICKET_BOOK.format(ticket_id=context['ticket_id']))


@when('I delete the ticket')
def when_delete_ticket(client: TestClient, context: dict[str, Any]) -> None:
    context['response'] = client.delete(TICKET_DELETE.format(ticket_id=context['ticket_id']))


# ============ Then Steps ============


@then(parsers.parse('the response status code should be {status_code:d}'))
def then_response_status_code(status_code: int, context: dict[str, Any]) -> None:
    response: httpx.Response = context['response']
    assert response.status_code == status_code, (
        f'Expected {status_code}, got {response.status_code}: {response.text}'
    )


@then(parsers.parse('the ticket id should be {ticket_id:d}'))
def then_ticket_id(ticket_id: int, context: dict[str, Any]) -> None:
    assert context['response'].json()['id'] == ticket_id


@then(parsers.parse('the ticket should be "{booking_status}"'))
def then_ticket_status(booking_status: str, context: dict[str, Any]) -> None:
    assert context['response'].json()['booking_status'] == booking_status


@then(parsers.parse('the ticket concert should be "{concert_name}"'))
def then_ticket_concert(concert_name: str, context: dict[str, Any]) -> None:
    assert context['response'].json()['concert_name'] == concert_name


@then(parsers.parse('the ticket price should be {price:f}'))
def then_ticket_price(price: float, context: dict[str, Any]) -> None:
    assert context['response'].json()['price'] == price


@then(parsers.parse('the error kind should be "{kind}"'))
def then_error_kind(kind: str, context: dict[str, Any]) -> None:
    assert context['response'].json()['kind'] == kind
