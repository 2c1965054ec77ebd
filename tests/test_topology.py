"""Topology resolution tests."""

import logging

import pytest
from roadroutes_core.errors import ConfigurationError
from roadroutes_core.topology.cluster import parse_cluster_url
from roadroutes_core.topology.descriptor import (
    Cluster,
    Endpoint,
    Sentinel,
    Standalone,
)
from roadroutes_core.topology.resolver import resolve_topology
from roadroutes_core.topology.sentinel import parse_sentinel_url


class TestClusterParsing:
    """Test cluster connection strings."""

    def test_shared_password(self):
        """Test a single password prefix applies to every node."""
        descriptor = resolve_topology("cluster://secret@h1:1000,h2:2000")
        assert descriptor == Cluster(
            nodes=(Endpoint("h1", 1000), Endpoint("h2", 2000)),
            password="secret",
        )

    def test_repeated_password(self):
        """Test segments repeating the password."""
        descriptor = parse_cluster_url("cluster://secret@h1:1000,secret@h2:2000")
        assert descriptor.password == "secret"
        assert [n.host for n in descriptor.nodes] == ["h1", "h2"]

    def test_leading_colon_stripped(self):
        """Test the redis-style ':password@' form."""
        descriptor = parse_cluster_url("cluster://:secret@h1")
        assert descriptor.password == "secret"
        assert descriptor.nodes == (Endpoint("h1"),)

    def test_no_password(self):
        """Test nodes without credentials."""
        descriptor = parse_cluster_url("cluster://h1:7000,h2")
        assert descriptor.password is None
        assert descriptor.nodes == (Endpoint("h1", 7000), Endpoint("h2"))

    def test_trailing_comma_ignored(self):
        """Test empty trailing segments."""
        descriptor = parse_cluster_url("cluster://h1:7000,")
        assert descriptor.nodes == (Endpoint("h1", 7000),)

    def test_empty_port_means_default(self):
        """Test 'host:' has no explicit port."""
        assert parse_cluster_url("cluster://h1:").nodes == (Endpoint("h1"),)

    def test_last_password_wins(self, caplog):
        """Test disagreeing passwords keep the last one and warn."""
        with caplog.at_level(logging.WARNING):
            descriptor = parse_cluster_url("cluster://a@h1,b@h2")
        assert descriptor.password == "b"
        assert "disagree" in caplog.text

    def test_password_without_host_rejected(self):
        """Test a credential with no host remainder."""
        with pytest.raises(ConfigurationError):
            resolve_topology("cluster://secret@")
        with pytest.raises(ConfigurationError):
            resolve_topology("cluster://secret@h1:1000,secret@")

    def test_invalid_port_rejected(self):
        """Test non-numeric ports."""
        with pytest.raises(ConfigurationError):
            parse_cluster_url("cluster://h1:abc")

    def test_no_nodes_rejected(self):
        """Test a marker with nothing after it."""
        with pytest.raises(ConfigurationError):
            parse_cluster_url("cluster://")

    def test_password_hidden_from_repr(self):
        """Test passwords are not shown in repr."""
        descriptor = parse_cluster_url("cluster://secret@h1")
        assert "secret" not in repr(descriptor)
        assert "secret" not in descriptor.describe()


class TestSentinelParsing:
    """Test sentinel connection strings."""

    def test_full_form(self):
        """Test password, hosts, master and db."""
        descriptor = parse_sentinel_url("sentinel://:pw@s1:26380,s2/mymaster/2")
        assert descriptor == Sentinel(
            sentinels=(Endpoint("s1", 26380), Endpoint("s2", 26379)),
            master_name="mymaster",
            password="pw",
            db=2,
        )

    def test_redis_sentinel_scheme(self):
        """Test the redis+sentinel scheme."""
        descriptor = resolve_topology("redis+sentinel://s1/master")
        assert isinstance(descriptor, Sentinel)
        assert descriptor.master_name == "master"
        assert descriptor.password is None
        assert descriptor.db == 0

    def test_missing_master_rejected(self):
        """Test the master name is required."""
        with pytest.raises(ConfigurationError):
            parse_sentinel_url("sentinel://s1:26379")

    def test_invalid_db_rejected(self):
        """Test non-numeric db."""
        with pytest.raises(ConfigurationError):
            parse_sentinel_url("sentinel://s1/master/zero")

    def test_no_hosts_rejected(self):
        """Test a string without sentinels."""
        with pytest.raises(ConfigurationError):
            parse_sentinel_url("sentinel:///master")


class TestResolveTopology:
    """Test topology classification."""

    def test_standalone_passthrough(self):
        """Test other URIs are returned unchanged."""
        descriptor = resolve_topology("redis://h:6379")
        assert descriptor == Standalone("redis://h:6379")
        assert descriptor.uri == "redis://h:6379"

    def test_unix_socket_is_standalone(self):
        """Test any non-cluster, non-sentinel scheme is standalone."""
        assert isinstance(resolve_topology("unix:///tmp/redis.sock"), Standalone)

    def test_cluster_marker_must_prefix(self):
        """Test the marker is matched as a prefix only."""
        descriptor = resolve_topology("redis://h:6379/0?name=cluster://x")
        assert isinstance(descriptor, Standalone)

    def test_empty_rejected(self):
        """Test empty connection strings."""
        with pytest.raises(ConfigurationError):
            resolve_topology("")
