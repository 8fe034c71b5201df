"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

"""
Responder 单元测试
"""

from types import SimpleNamespace

import pytest

from drf_responses import (
    ApplicationResponder,
    PaginatedList,
    RespondableViewSet,
    Responder,
)
from drf_responses.exceptions import ResponderNotImplementedError
from drf_responses.serializers import ResponseSerializer


# ========== 测试用的具体实现类 ==========


class Product:
    def __init__(self, id):
        self.id = id


class ProductSerializer(ResponseSerializer):
    def to_dict(self):
        return {"id": self.resource.id}


class ProductViewSet(RespondableViewSet):
    controller_name = "products"


class ProductResponder(ApplicationResponder):
    def featured(self):
        return self.render_collection_with_type(
            type="featured", additional_meta={"category": self.params.get("category_id")}
        )

    def recommended(self):
        return self.render_item_with_meta(additional_meta={"reason": "popular"})

    def grouped(self):
        return self.render_grouped_data({"a": [1], "b": [2]})


@pytest.fixture
def make_responder(make_view):
    def _make_responder(record, responder_class=ProductResponder, path="/products/", context=None):
        view = make_view(ProductViewSet, action="index", path=path)
        return responder_class(view, record, ProductSerializer, context)

    return _make_responder


# ========== 测试类 ==========


class TestResponder:
    """测试 Responder 基类"""

    def test_render_not_implemented(self, make_responder):
        responder = make_responder([], responder_class=Responder)
        with pytest.raises(ResponderNotImplementedError) as exc_info:
            responder.render()
        assert exc_info.value.message == "Responder must implement #render method"

    def test_has_action(self):
        """测试只有公开的非辅助方法才是 action"""
        assert ProductResponder.has_action("featured")
        assert not ProductResponder.has_action("render_json")
        assert not ProductResponder.has_action("render_collection_with_type")
        assert not ProductResponder.has_action("base_meta")
        assert not ProductResponder.has_action("_private")
        assert not ProductResponder.has_action("missing")
        assert not ProductResponder.has_action("")

    def test_render_is_not_helper(self):
        assert ProductResponder.has_action("render")

    def test_shape_checks(self, make_responder):
        assert make_responder([Product(1)]).is_collection()
        assert make_responder(Product(1)).is_single_item()
        assert not make_responder([Product(1)]).is_paginated()
        assert make_responder(PaginatedList([Product(1)])).is_paginated()

    def test_params(self, make_responder):
        responder = make_responder([], path="/products/?category_id=7")
        assert responder.params.get("category_id") == "7"

    def test_params_without_request(self):
        responder = Responder(SimpleNamespace(), [], ProductSerializer)
        assert responder.params == {}
        assert responder.request is None
        assert responder.context == {}

    def test_current_user_from_context(self, make_responder):
        responder = make_responder([], context={"current_user": "alice"})
        assert responder.current_user == "alice"

    def test_serialize_defaults(self, make_responder):
        responder = make_responder([Product(1), Product(2)])
        assert responder.serialize_collection() == [{"id": 1}, {"id": 2}]
        assert responder.serialize_item(Product(3)) == {"id": 3}


class TestRenderCollectionWithMeta:
    """测试集合渲染的 meta 规则"""

    def test_paginated(self, make_responder):
        records = PaginatedList([Product(1)], current_page=1, total_pages=2, total_count=2)
        response = make_responder(records).render_collection_with_meta(
            additional_meta={"type": "popular"}
        )
        assert response.data == {
            "data": [{"id": 1}],
            "meta": {"current_page": 1, "total_pages": 2, "total_count": 2, "type": "popular"},
        }

    def test_additional_meta_only(self, make_responder):
        response = make_responder([Product(1)]).render_collection_with_meta(
            additional_meta={"type": "popular"}
        )
        assert response.data == {"data": [{"id": 1}], "meta": {"type": "popular"}}

    def test_no_meta(self, make_responder):
        response = make_responder([Product(1)]).render_collection_with_meta()
        assert response.data == {"data": [{"id": 1}]}


class TestApplicationResponder:
    """测试项目级 Responder 辅助方法"""

    def test_render_collection_with_type(self, make_responder):
        responder = make_responder([Product(1), Product(2)], path="/products/?category_id=3")
        response = responder.featured()
        meta = response.data["meta"]
        assert response.data["data"] == [{"id": 1}, {"id": 2}]
        assert meta["type"] == "featured"
        assert meta["category"] == "3"
        assert meta["count"] == 2
        assert "timestamp" in meta

    def test_render_item_with_meta(self, make_responder):
        response = make_responder(Product(1)).recommended()
        assert response.data["data"] == {"id": 1}
        assert response.data["meta"]["reason"] == "popular"
        assert "count" not in response.data["meta"]

    def test_render_grouped_data(self, make_responder):
        assert make_responder([]).grouped().data == {"a": [1], "b": [2]}

    def test_record_count_for_iterator(self, make_responder):
        assert make_responder(iter([Product(1), Product(2)])).record_count() == 2

    def test_generator_record(self, make_responder):
        """测试生成器 record 计数后仍能完整序列化"""
        responder = make_responder(Product(i) for i in range(3))
        response = responder.featured()
        assert response.data["data"] == [{"id": 0}, {"id": 1}, {"id": 2}]
        assert response.data["meta"]["count"] == 3

    def test_generator_record_with_meta(self, make_responder):
        responder = make_responder(Product(i) for i in range(2))
        response = responder.render_collection_with_meta(additional_meta={"type": "all"})
        assert response.data == {"data": [{"id": 0}, {"id": 1}], "meta": {"type": "all"}}

    def test_filters_applied(self, make_responder):
        responder = make_responder([], path="/products/?status=active&level=&sort_by=name")
        assert responder.filters_applied() == {"status": "active", "sort_by": "name"}

    def test_no_filters_applied(self, make_responder):
        assert make_responder([]).filters_applied() is None

    def test_param_present(self, make_responder):
        responder = make_responder([], path="/products/?q=&page=2")
        assert responder.param_present("page")
        assert not responder.param_present("q")
        assert not responder.param_present("missing")

    def test_dispatched_through_render_with(self, make_view):
        """测试经由 render_with 调用 Responder 的 action"""
        view = make_view(ProductViewSet, action="list")
        response = view.render_with(
            [Product(1)], responder=ProductResponder, action="featured", serializer=ProductSerializer
        )
        assert response.data["meta"]["type"] == "featured"
        assert response.data["meta"]["count"] == 1
