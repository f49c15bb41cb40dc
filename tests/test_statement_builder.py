"""Tests for Cypher statement building."""

import pytest

from bank_graph.loaders.statement_builder import (
    build_entity_statement,
    build_relationship_statement,
    build_statement,
)
from bank_graph.models import ACCOUNT, CARD, CONTRACT, PERSON, REPRESENTED_BY, TRANSACTION


@pytest.fixture
def person_record():
    return {
        "first-name": "A",
        "last-name": "B",
        "gender": "female",
        "phone-number": "123",
        "city": "X",
        "email": "a@b.com",
    }


@pytest.fixture
def transaction_record():
    return {
        "account-of-receiver": "DE33500105175927417349",
        "account-of-creator": "DE10500105172784626316",
        "identifier": "1",
        "amount": "250.75",
        "reference": "Rent",
        "category": "housing",
        "execution-date": "2020-02-01T09:30:00",
    }


def set_lines(statement):
    return [line for line in statement.splitlines() if line.startswith("SET ")]


class TestEntityStatement:
    def test_one_set_clause_per_column(self, person_record):
        statement = build_entity_statement(PERSON, person_record)

        assert statement.splitlines()[0] == "CREATE (person:Person)"
        assert set_lines(statement) == [
            'SET person.first_name = "A"',
            'SET person.last_name = "B"',
            'SET person.gender = "female"',
            'SET person.phone_number = "123"',
            'SET person.city = "X"',
            'SET person.email = "a@b.com"',
        ]

    def test_typed_values(self):
        record = {
            "balance": "1000.5",
            "account-number": "DE33500105175927417349",
            "opening-date": "2018-06-01T08:00:00",
            "account-type": "checking",
        }

        statement = build_entity_statement(ACCOUNT, record)

        assert "SET account.balance = 1000.5" in statement
        assert 'SET account.account_number = "DE33500105175927417349"' in statement
        assert 'SET account.opening_date = localdatetime("2018-06-01T08:00:00.000")' in statement
        assert len(set_lines(statement)) == len(ACCOUNT.attributes)

    def test_missing_column_raises(self, person_record):
        del person_record["city"]
        with pytest.raises(KeyError):
            build_entity_statement(PERSON, person_record)

    def test_quote_in_value_cannot_break_out(self, person_record):
        person_record["city"] = 'X"}) DETACH DELETE (n) //'

        statement = build_entity_statement(PERSON, person_record)

        assert 'SET person.city = "X\\"}) DETACH DELETE (n) //"' in statement


class TestRelationshipStatement:
    def test_transaction_matches_both_accounts(self, transaction_record):
        lines = build_relationship_statement(TRANSACTION, transaction_record).splitlines()

        assert lines[0] == 'MATCH (account_of_receiver:Account {account_number: "DE33500105175927417349"})'
        assert lines[1] == 'MATCH (account_of_creator:Account {account_number: "DE10500105172784626316"})'
        assert lines[2] == "CREATE (transaction:Transaction)"
        assert lines[3] == "CREATE (transaction)-[:ACCOUNT_OF_RECEIVER]->(account_of_receiver)"
        assert lines[4] == "CREATE (transaction)-[:ACCOUNT_OF_CREATOR]->(account_of_creator)"
        assert lines[-1] == "RETURN count(transaction) AS created"

    def test_transaction_attributes(self, transaction_record):
        statement = build_relationship_statement(TRANSACTION, transaction_record)

        assert set_lines(statement) == [
            "SET transaction.identifier = 1",
            "SET transaction.amount = 250.75",
            'SET transaction.reference = "Rent"',
            'SET transaction.category = "housing"',
            'SET transaction.execution_date = localdatetime("2020-02-01T09:30:00.000")',
        ]

    def test_contract_binds_three_roles(self):
        record = {
            "provider": "N26",
            "customer": "a@b.com",
            "offer": "DE33500105175927417349",
            "identifier": "7",
            "sign-date": "2019-05-05T12:00:00",
        }

        statement = build_relationship_statement(CONTRACT, record)

        assert 'MATCH (provider:Bank {name: "N26"})' in statement
        assert 'MATCH (customer:Person {email: "a@b.com"})' in statement
        assert 'MATCH (offer:Account {account_number: "DE33500105175927417349"})' in statement
        assert statement.count("CREATE (contract)-[:") == 3

    def test_card_key_is_matched_as_number(self):
        record = {"bank-card": "4111111111111111", "bank-account": "DE33500105175927417349", "identifier": "3"}

        statement = build_relationship_statement(REPRESENTED_BY, record)

        assert "MATCH (bank_card:Card {card_number: 4111111111111111})" in statement
        assert "CREATE (represented_by)-[:BANK_CARD]->(bank_card)" in statement
        assert "SET represented_by.identifier = 3" in statement


class TestBuildStatement:
    def test_dispatches_on_schema_type(self, person_record, transaction_record):
        assert build_statement(PERSON, person_record).startswith("CREATE (person:Person)")
        assert build_statement(TRANSACTION, transaction_record).startswith("MATCH ")

    def test_entity_schema_for_card(self):
        record = {
            "card-number": "4111111111111111",
            "name-on-card": "A B",
            "created-date": "2020-01-01",
            "expiry-date": "2024-01-01",
        }
        assert "SET card.card_number = 4111111111111111" in build_statement(CARD, record)
