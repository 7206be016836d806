"""
Tests for the per-object wrappers against the fake server
"""
import pytest

from zabbix_rpc.errors import APIError, ExpectedMore, ExpectedOneResult
from zabbix_rpc.resources import application, lld, proxy, user, usergroup
from zabbix_rpc.resources.application import Application
from zabbix_rpc.resources.lld import ItemType, LLDEvalType, LLDOperator, LLDRule, LLDRuleFilter, LLDRuleFilterCondition
from zabbix_rpc.resources.proxy import Proxy, ProxyStatus
from zabbix_rpc.resources.user import User
from zabbix_rpc.resources.usergroup import UserGroup, UserGroupID, UserGroupPermission


class TestApplication:
    """application.* wrappers"""

    def test_create_sets_ids(self, api, fake):
        apps = [Application(hostid="10084", name="CPU"), Application(hostid="10084", name="Memory")]
        ids = application.create(api, apps)
        assert ids == ["10001", "10002"]
        assert [a.applicationid for a in apps] == ids
        assert fake.requests[-1]["params"] == [
            {"hostid": "10084", "name": "CPU"},
            {"hostid": "10084", "name": "Memory"},
        ]

    def test_get_defaults_output(self, api, fake):
        application.get(api)
        assert fake.requests[-1]["params"] == {"output": "extend"}

    def test_get_keeps_caller_output(self, api, fake):
        params = {"output": ["name"]}
        application.get(api, params)
        assert fake.requests[-1]["params"] == {"output": ["name"]}
        assert params == {"output": ["name"]}

    def test_get_by_id(self, api, fake):
        app_id = fake.stores["application"].add({"hostid": "10084", "name": "CPU"})
        app = application.get_by_id(api, app_id)
        assert app.applicationid == app_id
        assert app.name == "CPU"
        assert fake.requests[-1]["params"]["applicationids"] == app_id

    def test_get_by_id_none(self, api):
        with pytest.raises(ExpectedOneResult) as exc_info:
            application.get_by_id(api, "424242")
        assert exc_info.value.count == 0

    def test_get_by_id_several(self, api, fake):
        """The server filter may match more than one object"""
        fake.stores["application"].add({"hostid": "1", "name": "a"})
        fake.stores["application"].add({"hostid": "1", "name": "b"})
        fake.handlers["application.get"] = lambda params: list(fake.stores["application"].objects.values())
        with pytest.raises(ExpectedOneResult) as exc_info:
            application.get_by_id(api, "10001")
        assert exc_info.value.count == 2

    def test_get_by_host_id_and_name(self, api, fake):
        fake.stores["application"].add({"hostid": "1", "name": "CPU"})
        fake.stores["application"].add({"hostid": "1", "name": "Disk"})
        fake.stores["application"].add({"hostid": "2", "name": "CPU"})
        app = application.get_by_host_id_and_name(api, "1", "CPU")
        assert app.applicationid == "10001"
        assert fake.requests[-1]["params"]["filter"] == {"name": "CPU"}

    def test_update(self, api, fake):
        app_id = fake.stores["application"].add({"hostid": "1", "name": "CPU"})
        app = application.get_by_id(api, app_id)
        app.name = "Processor"
        application.update(api, [app])
        assert fake.stores["application"].objects[app_id]["name"] == "Processor"

    def test_delete_clears_ids(self, api, fake):
        apps = [Application(hostid="1", name="a"), Application(hostid="1", name="b")]
        application.create(api, apps)
        application.delete(api, apps)
        assert all(a.applicationid is None for a in apps)
        assert fake.stores["application"].objects == {}

    def test_delete_count_mismatch_keeps_ids(self, api, fake):
        apps = [Application(hostid="1", name="a"), Application(hostid="1", name="b")]
        application.create(api, apps)
        fake.handlers["application.delete"] = lambda params: {"applicationids": params[:1]}
        with pytest.raises(ExpectedMore) as exc_info:
            application.delete(api, apps)
        assert (exc_info.value.expected, exc_info.value.got) == (2, 1)
        assert [a.applicationid for a in apps] == ["10001", "10002"]

    def test_delete_unknown_id(self, api):
        with pytest.raises(APIError) as exc_info:
            application.delete_by_ids(api, ["999"])
        assert exc_info.value.code == -32500


class TestProxy:
    """proxy.* wrappers"""

    def test_status_sent_as_string(self, api, fake):
        proxies = [Proxy(host="proxy-01", status=ProxyStatus.ACTIVE, description="dc1")]
        proxy.create(api, proxies)
        assert fake.requests[-1]["params"] == [{"host": "proxy-01", "status": "5", "description": "dc1"}]
        assert proxies[0].proxyid == "10001"

    def test_get_decodes_string_ints(self, api, fake):
        fake.stores["proxy"].add({"host": "p", "status": "6", "tls_connect": "1", "tls_accept": "1"})
        p = proxy.get_by_id(api, "10001")
        assert p.status == ProxyStatus.PASSIVE
        assert p.tls_connect == 1

    def test_update_and_delete(self, api, fake):
        proxies = [Proxy(host="p", status=5)]
        proxy.create(api, proxies)
        proxies[0].description = "moved"
        proxy.update(api, proxies)
        assert fake.stores["proxy"].objects["10001"]["description"] == "moved"
        proxy.delete(api, proxies)
        assert proxies[0].proxyid is None

    def test_delete_by_ids(self, api, fake):
        fake.stores["proxy"].add({"host": "p", "status": "5"})
        assert proxy.delete_by_ids(api, ["10001"]) == ["10001"]


class TestUser:
    """user.* wrappers"""

    def test_create_with_groups(self, api, fake):
        users = [User(username="jdoe", passwd="s3cret!", roleid="1", usrgrps=[UserGroupID(usrgrpid="7")])]
        user.create(api, users)
        sent = fake.requests[-1]["params"][0]
        assert sent["usrgrps"] == [{"usrgrpid": "7"}]
        assert sent["passwd"] == "s3cret!"
        assert "userid" not in sent
        assert users[0].userid == "10001"

    def test_get_without_password(self, api, fake):
        fake.stores["user"].add({"username": "jdoe", "roleid": "1", "name": "J", "surname": "Doe"})
        u = user.get_by_id(api, "10001")
        assert u.username == "jdoe"
        assert u.passwd is None
        assert u.usrgrps is None

    def test_delete(self, api):
        users = [User(username="a"), User(username="b")]
        user.create(api, users)
        user.delete(api, users)
        assert [u.userid for u in users] == [None, None]


class TestUserGroup:
    """usergroup.* wrappers"""

    def test_round_trip_through_server(self, api, fake):
        groups = [
            UserGroup(
                name="ops",
                gui_access=2,
                hostgroup_rights=[UserGroupPermission(id="4", permission=3)],
            )
        ]
        usergroup.create(api, groups)
        sent = fake.requests[-1]["params"][0]
        assert sent["gui_access"] == "2"
        assert sent["hostgroup_rights"] == [{"id": "4", "permission": "3"}]

        g = usergroup.get_by_id(api, groups[0].usrgrpid)
        assert g.gui_access == 2
        assert g.hostgroup_rights[0].permission == 3

    def test_update(self, api, fake):
        groups = [UserGroup(name="ops")]
        usergroup.create(api, groups)
        groups[0].users_status = 1
        usergroup.update(api, groups)
        assert fake.stores["usergroup"].objects["10001"]["users_status"] == "1"

    def test_delete_mismatch(self, api, fake):
        fake.handlers["usergroup.delete"] = lambda params: {"usrgrpids": []}
        with pytest.raises(ExpectedMore):
            usergroup.delete_by_ids(api, ["1"])


def _rule(**kw):
    base = dict(
        delay="1h",
        hostid="10084",
        key="vfs.fs.discovery",
        name="Mounted filesystem discovery",
        type=ItemType.ZABBIX_AGENT,
    )
    base.update(kw)
    return LLDRule(**base)


class TestLLD:
    """discoveryrule.* wrappers"""

    def test_create_uses_zabbix_names(self, api, fake):
        rules = [
            _rule(
                filter=LLDRuleFilter(
                    evaltype=LLDEvalType.AND,
                    conditions=[
                        LLDRuleFilterCondition(macro="{#FSTYPE}", value="ext4", operator=LLDOperator.MATCH)
                    ],
                )
            )
        ]
        lld.create(api, rules)
        sent = fake.requests[-1]["params"][0]
        assert sent["key_"] == "vfs.fs.discovery"
        assert sent["type"] == "0"
        assert sent["filter"]["evaltype"] == "1"
        assert sent["filter"]["conditions"] == [{"macro": "{#FSTYPE}", "value": "ext4", "operator": "8"}]
        assert "headers" not in sent
        assert rules[0].itemid == "10001"

    def test_headers_sent_when_set(self, api, fake):
        rules = [_rule(type=ItemType.HTTP_AGENT, url="http://x", headers={"X-Token": "abc"})]
        lld.create(api, rules)
        assert fake.requests[-1]["params"][0]["headers"] == {"X-Token": "abc"}

    def test_empty_headers_list_decoded(self, api, fake):
        """Rules without headers come back with headers: []"""
        fake.stores["discoveryrule"].add(
            {"delay": "1h", "hostid": "1", "key_": "k", "name": "n", "type": "0", "headers": []}
        )
        rule = lld.get_by_id(api, "10001")
        assert rule.headers == {}
        assert rule.key == "k"
        assert rule.type == ItemType.ZABBIX_AGENT

    def test_headers_as_name_value_list(self, api, fake):
        fake.stores["discoveryrule"].add(
            {
                "delay": "1h",
                "hostid": "1",
                "key_": "k",
                "name": "n",
                "type": "19",
                "headers": [{"name": "Accept", "value": "application/json"}],
            }
        )
        rule = lld.get_by_id(api, "10001")
        assert rule.headers == {"Accept": "application/json"}

    def test_exists_operator_decoded(self, api, fake):
        fake.stores["discoveryrule"].add(
            {
                "delay": "1h",
                "hostid": "1",
                "key_": "k",
                "name": "n",
                "type": "0",
                "filter": {
                    "evaltype": "0",
                    "formula": "",
                    "conditions": [
                        {"macro": "{#A}", "value": "", "operator": "12", "formulaid": "A"},
                        {"macro": "{#B}", "value": "", "operator": "99", "formulaid": "B"},
                    ],
                },
            }
        )
        rule = lld.get_by_id(api, "10001")
        exists, unknown = rule.filter.conditions
        assert exists.operator is LLDOperator.EXISTS
        assert unknown.operator == "99"
        assert unknown.to_params()["operator"] == "99"

    def test_update(self, api, fake):
        rules = [_rule()]
        lld.create(api, rules)
        rules[0].delay = "30m"
        lld.update(api, rules)
        assert fake.stores["discoveryrule"].objects["10001"]["delay"] == "30m"

    def test_delete_list_result(self, api):
        rules = [_rule(), _rule(key="net.if.discovery")]
        lld.create(api, rules)
        lld.delete(api, rules)
        assert [r.itemid for r in rules] == [None, None]

    def test_delete_mapping_result(self, api, fake):
        """ruleids may be an object keyed by position"""
        fake.handlers["discoveryrule.delete"] = lambda params: {
            "ruleids": {str(i): rid for i, rid in enumerate(params)}
        }
        assert lld.delete_by_ids(api, ["5", "6"]) == ["5", "6"]

    def test_delete_mapping_mismatch(self, api, fake):
        fake.handlers["discoveryrule.delete"] = lambda params: {"ruleids": {"0": params[0]}}
        with pytest.raises(ExpectedMore) as exc_info:
            lld.delete_by_ids(api, ["5", "6"])
        assert (exc_info.value.expected, exc_info.value.got) == (2, 1)
