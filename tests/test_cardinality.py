"""
Tests for relation cardinality resolution
"""

from unittest import TestCase

from schema_generator.constants import SCHEMA_ORG
from schema_generator.domain.cardinality import CardinalityResolver
from schema_generator.domain.models import Attribute, Cardinality, ClassInfo, PropertyInfo


class TestCardinalityResolver(TestCase):
    """Test cases for CardinalityResolver"""

    def setUp(self):
        self.resolver = CardinalityResolver({"Person": ClassInfo(name="Person")})

    def _relation(self, cardinality, range_name="Person", **kwargs):
        return PropertyInfo(
            name="author",
            range=SCHEMA_ORG + range_name,
            range_name=range_name,
            cardinality=cardinality,
            **kwargs
        )

    def test_get_relation_name(self):
        assert self.resolver.get_relation_name("Person") == "Person"
        assert self.resolver.get_relation_name("Ghost") is None
        assert self.resolver.get_relation_name(None) is None

    def test_unresolved_target_yields_nothing(self):
        prop = self._relation(Cardinality.CARDINALITY_0_1, range_name="Ghost")

        assert self.resolver.resolve(prop) == []

    def test_one_to_one(self):
        assert self.resolver.resolve(self._relation(Cardinality.CARDINALITY_0_1)) == [
            Attribute("ORM.OneToOne", {"targetEntity": "Person"}),
            Attribute("ORM.JoinColumn", {}),
        ]
        assert self.resolver.resolve(self._relation(Cardinality.CARDINALITY_1_1)) == [
            Attribute("ORM.OneToOne", {"targetEntity": "Person"}),
            Attribute("ORM.JoinColumn", {"nullable": False}),
        ]

    def test_many_to_one(self):
        """Unknown cardinality is treated as many-to-one"""
        for cardinality in (Cardinality.CARDINALITY_UNKNOWN, Cardinality.CARDINALITY_N_0):
            assert self.resolver.resolve(self._relation(cardinality)) == [
                Attribute("ORM.ManyToOne", {"targetEntity": "Person"}),
                Attribute("ORM.JoinColumn", {}),
            ]

        assert self.resolver.resolve(self._relation(Cardinality.CARDINALITY_N_1, inversed_by="books")) == [
            Attribute("ORM.ManyToOne", {"targetEntity": "Person", "inversedBy": "books"}),
            Attribute("ORM.JoinColumn", {"nullable": False}),
        ]

    def test_to_many_inverse_join_column(self):
        """1..N requires the inverse side, 0..N does not"""
        one_to_many = self.resolver.resolve(self._relation(Cardinality.CARDINALITY_1_N))
        zero_to_many = self.resolver.resolve(self._relation(Cardinality.CARDINALITY_0_N))

        assert one_to_many == [
            Attribute("ORM.ManyToMany", {"targetEntity": "Person"}),
            Attribute("ORM.InverseJoinColumn", {"nullable": False, "unique": True}),
        ]
        assert zero_to_many[-1] == Attribute("ORM.InverseJoinColumn", {"unique": True})

    def test_to_many_with_mapped_by_and_join_table(self):
        prop = self._relation(Cardinality.CARDINALITY_0_N, mapped_by="book")

        assert self.resolver.resolve(prop, relation_table_name="book_author") == [
            Attribute("ORM.OneToMany", {"targetEntity": "Person", "mappedBy": "book"}),
            Attribute("ORM.JoinTable", {"name": "book_author"}),
            Attribute("ORM.InverseJoinColumn", {"unique": True}),
        ]

    def test_many_to_many(self):
        prop = self._relation(Cardinality.CARDINALITY_N_N)

        assert self.resolver.resolve(prop) == [Attribute("ORM.ManyToMany", {"targetEntity": "Person"})]
        assert self.resolver.resolve(prop, relation_table_name="book_author") == [
            Attribute("ORM.ManyToMany", {"targetEntity": "Person"}),
            Attribute("ORM.JoinTable", {"name": "book_author"}),
        ]

    def test_options_are_merged(self):
        """Column options go to the join column, relation options to the association"""
        prop = self._relation(Cardinality.CARDINALITY_1_1)

        attributes = self.resolver.resolve(
            prop,
            column_options={"onDelete": "CASCADE"},
            relation_options={"cascade": ["persist"]},
        )

        assert attributes == [
            Attribute("ORM.OneToOne", {"targetEntity": "Person", "cascade": ["persist"]}),
            Attribute("ORM.JoinColumn", {"nullable": False, "onDelete": "CASCADE"}),
        ]
