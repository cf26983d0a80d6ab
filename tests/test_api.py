# API 测试
"""
测试 Schema 与图谱路由
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient
from pydantic import ValidationError

from biograph.api.main import app
from biograph.knowledge.models.clinical_trials import ClinicalTrial, Facility, Link
from biograph.knowledge.models.literature import Fragment
from biograph.knowledge.schema import load_registry, schema_assertions


@pytest.fixture
def client() -> TestClient:
    # 不使用上下文管理器时不执行 lifespan
    return TestClient(app)


@pytest.fixture
def graph_client(mock_graph_client):
    with patch("biograph.api.routes.graph.get_neo4j_client", return_value=mock_graph_client):
        yield mock_graph_client


class TestRoot:
    """服务端点测试"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "biograph API"

    def test_health_degraded_without_neo4j(self, client):
        failing = MagicMock()
        failing.connect = AsyncMock(side_effect=ConnectionError("refused"))

        with patch("biograph.api.main.get_neo4j_client", return_value=failing):
            response = client.get("/health")

        body = response.json()
        assert body["status"] == "degraded"
        assert body["services"]["neo4j"]["error"] == "refused"
        assert body["schema"]["types"] == len(load_registry())

    def test_health_connected(self, client, mock_graph_client):
        mock_graph_client.get_statistics.return_value = {
            "nodes": {"Gene": 2, "GeneSymbol": 3},
            "edges": {"MAPS": 3},
        }

        with patch("biograph.api.main.get_neo4j_client", return_value=mock_graph_client):
            body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["services"]["neo4j"] == {"status": "connected", "nodes": 5, "edges": 3}


class TestSchemaRoutes:
    """/api/v1/schema 路由测试"""

    def test_sdl(self, client):
        response = client.get("/api/v1/schema/sdl")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "type ClinicalTrial {" in response.text
        assert "directive @relation" not in response.text

    def test_sdl_with_directives(self, client):
        response = client.get("/api/v1/schema/sdl", params={"with_directives": True})

        assert "directive @relation" in response.text

    def test_sdl_single_module(self, client):
        response = client.get("/api/v1/schema/sdl", params={"module": "Patents"})

        assert response.status_code == 200
        assert "type PatentClaim {" in response.text
        assert "type ClinicalTrial" not in response.text

    def test_sdl_unknown_module(self, client):
        response = client.get("/api/v1/schema/sdl", params={"module": "Chemistry"})

        assert response.status_code == 404

    def test_list_types(self, client):
        types = client.get("/api/v1/schema/types").json()

        assert len(types) == len(load_registry())
        assert types[0] == {
            "name": "GeneSymbol",
            "kind": "node",
            "module": "Biomedical",
            "description": types[0]["description"],
        }
        assert types[0]["description"].startswith("GeneSymbol nodes represent")

    def test_list_types_of_module(self, client):
        types = client.get("/api/v1/schema/types", params={"module": "Literature"}).json()

        assert [t["name"] for t in types] == [
            "Citation",
            "Fragment",
            "FromBodyTextMentions",
            "FromAbstractMentions",
        ]
        assert types[2]["kind"] == "relationship"

    def test_get_node_type(self, client):
        body = client.get("/api/v1/schema/types/Facility").json()

        assert body["kind"] == "node"
        assert body["module"] == "ClinicalTrials"
        assert body["properties"][0]["name"] == "name"
        assert body["properties"][0]["directive"] == "id"
        city = next(r for r in body["references"] if r["name"] == "city")
        assert city == {
            "name": "city",
            "type": "City",
            "target": "City",
            "relation": "LOCATED_IN",
            "direction": "OUT",
            "description": "The city the facility is located in.",
        }
        assert "type Facility {" in body["sdl"]

    def test_get_relationship_type(self, client):
        body = client.get("/api/v1/schema/types/Synonym").json()

        assert body["kind"] == "relationship"
        assert body["relation_name"] == "SYNONYM"
        assert [r["name"] for r in body["references"]] == ["synonymOf", "synonym"]
        assert body["references"][0]["relation"] is None

    def test_get_unknown_type(self, client):
        assert client.get("/api/v1/schema/types/Drug").status_code == 404

    def test_lint(self, client):
        body = client.get("/api/v1/schema/lint").json()

        assert [i["severity"] for i in body["issues"]] == ["warning"]
        assert body["issues"][0]["code"] == "untyped-reference"

    def test_assertions(self, client):
        body = client.get("/api/v1/schema/assertions").json()

        expected = schema_assertions(load_registry())
        assert body["statements"] == expected
        assert body["count"] == len(expected)


class TestGraphRoutes:
    """/api/v1/graph 路由测试"""

    def test_statistics(self, client, graph_client):
        graph_client.get_statistics.return_value = {"nodes": {"Gene": 1}, "edges": {}}

        response = client.get("/api/v1/graph/statistics")

        assert response.status_code == 200
        assert response.json() == {"nodes": {"Gene": 1}, "edges": {}}

    def test_statistics_failure(self, client, graph_client):
        graph_client.get_statistics.side_effect = RuntimeError("database unavailable")

        response = client.get("/api/v1/graph/statistics")

        assert response.status_code == 500
        assert response.json()["detail"] == "database unavailable"

    def test_get_node(self, client, graph_client):
        graph_client.get_node.return_value = ClinicalTrial(
            NCTId="NCT04280705",
            data_source="clinicaltrials.gov",
            url="https://clinicaltrials.gov/show/NCT04280705",
        )

        response = client.get("/api/v1/graph/ClinicalTrial/node", params={"key": "NCT04280705"})

        assert response.status_code == 200
        assert response.json() == {
            "type": "ClinicalTrial",
            "key": "NCT04280705",
            "properties": {
                "NCTId": "NCT04280705",
                "data_source": "clinicaltrials.gov",
                "url": "https://clinicaltrials.gov/show/NCT04280705",
            },
        }
        graph_client.get_node.assert_awaited_once_with(ClinicalTrial, "NCT04280705")

    def test_get_node_by_url(self, client, graph_client):
        graph_client.get_node.return_value = Link(url="https://example.org/a")

        response = client.get("/api/v1/graph/Link/node", params={"key": "https://example.org/a"})

        assert response.status_code == 200
        assert response.json()["properties"] == {"url": "https://example.org/a"}
        graph_client.get_node.assert_awaited_once_with(Link, "https://example.org/a")

    def test_key_required(self, client, graph_client):
        assert client.get("/api/v1/graph/ClinicalTrial/node").status_code == 422
        graph_client.get_node.assert_not_awaited()

    def test_node_not_found(self, client, graph_client):
        response = client.get("/api/v1/graph/ClinicalTrial/node", params={"key": "NCT00000000"})

        assert response.status_code == 404

    def test_unknown_type(self, client, graph_client):
        assert client.get("/api/v1/graph/Drug/node", params={"key": "x"}).status_code == 404
        assert client.get("/api/v1/graph/Synonym/node", params={"key": "x"}).status_code == 404
        graph_client.get_node.assert_not_awaited()

    def test_type_without_id(self, client, graph_client):
        graph_client.get_node.side_effect = ValueError("Design has no @id field to look nodes up by")

        response = client.get("/api/v1/graph/Design/node", params={"key": "x"})

        assert response.status_code == 400

    def test_stored_node_not_matching_type(self, client, graph_client):
        graph_client.get_node.side_effect = ValidationError.from_exception_data("Facility", [])

        response = client.get("/api/v1/graph/Facility/node", params={"key": "Charité"})

        assert response.status_code == 500

    def test_list_nodes_with_filters(self, client, graph_client):
        graph_client.find_nodes.return_value = [
            ClinicalTrial(NCTId="NCT1", data_source="clinicaltrials.gov", url="u1"),
            ClinicalTrial(NCTId="NCT2", data_source="clinicaltrials.gov", url="u2"),
        ]

        response = client.get(
            "/api/v1/graph/ClinicalTrial",
            params={"limit": 5, "data_source": "clinicaltrials.gov"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert [n["NCTId"] for n in body["nodes"]] == ["NCT1", "NCT2"]
        graph_client.find_nodes.assert_awaited_once_with(
            ClinicalTrial, {"data_source": "clinicaltrials.gov"}, limit=5, skip=0
        )

    def test_filter_coerced_to_field_type(self, client, graph_client):
        client.get("/api/v1/graph/Fragment", params={"sequence": "3"})

        graph_client.find_nodes.assert_awaited_once_with(Fragment, {"sequence": 3}, limit=100, skip=0)

    def test_invalid_filter_value(self, client, graph_client):
        response = client.get("/api/v1/graph/Fragment", params={"sequence": "third"})

        assert response.status_code == 400
        graph_client.find_nodes.assert_not_awaited()

    def test_unknown_filter(self, client, graph_client):
        response = client.get("/api/v1/graph/ClinicalTrial", params={"sponsor": "Pfizer"})

        assert response.status_code == 400
        graph_client.find_nodes.assert_not_awaited()

    def test_limit_bounds(self, client, graph_client):
        assert client.get("/api/v1/graph/ClinicalTrial", params={"limit": 0}).status_code == 422

    def test_get_related(self, client, graph_client):
        graph_client.get_related.return_value = [Facility(name="Charité")]

        response = client.get(
            "/api/v1/graph/ClinicalTrial/related/conductedAt",
            params={"key": "NCT04280705"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["relation"] == "CONDUCTED_AT"
        assert body["direction"] == "OUT"
        assert body["target"] == "Facility"
        assert body["nodes"] == [{"name": "Charité"}]
        graph_client.get_related.assert_awaited_once_with(
            ClinicalTrial, "NCT04280705", "conductedAt", limit=100
        )

    def test_get_related_from_url(self, client, graph_client):
        response = client.get(
            "/api/v1/graph/Link/related/trials",
            params={"key": "https://www.who.int/ictrp/"},
        )

        assert response.status_code == 200
        assert response.json()["direction"] == "IN"
        graph_client.get_related.assert_awaited_once_with(
            Link, "https://www.who.int/ictrp/", "trials", limit=100
        )

    def test_get_related_unknown_field(self, client, graph_client):
        response = client.get(
            "/api/v1/graph/ClinicalTrial/related/url",
            params={"key": "NCT04280705"},
        )

        assert response.status_code == 404
        graph_client.get_related.assert_not_awaited()
