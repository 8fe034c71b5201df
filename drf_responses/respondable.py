"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

import inspect
import logging
from collections.abc import Iterable, Mapping
from types import MethodType

from rest_framework import status
from rest_framework.response import Response

from drf_responses import defaults
from drf_responses.context import RequestSnapshot, build_context
from drf_responses.decorators import RESPONSE_ACTIONS_ATTR
from drf_responses.exceptions import (
    ResponseHandlerNotFound,
    ResponsesException,
    StandardErrorCodes,
)
from drf_responses.resolver import (
    action_from_handler_name,
    handler_name_for,
    resolve_handler_name,
)
from drf_responses.serializers import (
    SerializerRegistry,
    serialize_collection,
    serialize_item,
)
from drf_responses.settings import responses_settings
from drf_responses.utils.text import controller_name_from_class, serializer_name_for

logger = logging.getLogger(__name__)


__doc__ = """
RespondableMixin - 按 action 选择响应方式的视图混入类

基本用法
--------
```python
class WidgetViewSet(RespondableMixin, viewsets.GenericViewSet):
    response_action_mappings = {"public_index": "index"}

    def list(self, request):
        return self.render_with(Widget.objects.all())

    @action(detail=False)
    def public_index(self, request):
        return self.render_with(Widget.objects.filter(public=True))

    def respond_for_export_csv(self, record, serializer_class, context):
        return self.render_json({"csv": ...})
```

处理函数
--------
处理函数的签名统一为 (self, record, serializer_class, context)，返回 DRF Response。
它们以 action 为键保存在每个类自己的 response_definitions 中，同时以 respond_for_<action>
的名称安装到类上。判断某个 action 是否有处理函数只查询注册表，不做反射。

来源有四种：
1. 类体中直接定义的 respond_for_<action> 方法
2. 类体中被 @response_for(...) 标记的方法
3. 类创建后调用 define_response_for / define_responses_for /
   define_crud_responses / generate_rest_responses
4. 内置的 index / show / create / update / destroy

别名
----
response_action_mappings 声明 action -> action 的别名，子类声明的内容与父类合并，
map_response_action / map_response_actions 也只做合并，不会替换已有映射。
为了让 DRF 的默认 action 名可以直接使用，内置别名 list -> index、retrieve -> show、
partial_update -> update。

注意事项
--------
- 注册表只在类定义/配置阶段写入，请求处理期间只读
- 别名只解析一跳
- 处理函数内部抛出的任何异常都原样向外传播
"""


def _collect_response_handlers(namespace: Mapping) -> dict:
    """
    从类的 __dict__ 中收集处理函数：respond_for_<action> 方法与 @response_for 标记的方法
    """
    handlers = {}
    for name, value in namespace.items():
        if not inspect.isfunction(value):
            continue
        action = action_from_handler_name(name)
        if action:
            handlers[action] = value
        for marked_action in getattr(value, RESPONSE_ACTIONS_ATTR, ()):
            handlers[marked_action] = value
    return handlers


def _collect_inherited_handlers(cls) -> dict:
    """
    从继承链上的普通类（非 RespondableMixin 子类）中收集处理函数

    只收集按属性查找规则在 cls 上实际可见的函数，继承链上越近的类优先。
    """
    handlers = {}
    for klass in reversed(cls.__mro__[1:]):
        if klass is object or issubclass(klass, RespondableMixin):
            continue
        visible = {
            name: value
            for name, value in vars(klass).items()
            if inspect.getattr_static(cls, name, None) is value
        }
        handlers.update(_collect_response_handlers(visible))
    return handlers


def _build_crud_handler(many: bool, context_func=None):
    """
    define_crud_responses 使用的处理函数模板
    """

    def handler(self, record, serializer_class, context):
        enhanced_context = dict(context)
        if context_func is not None:
            snapshot = RequestSnapshot.capture(
                self, self.get_response_action(), record, context
            )
            additional_context = context_func(snapshot)
            if isinstance(additional_context, Mapping):
                enhanced_context.update(additional_context)

        if many:
            data = self.serialize_collection(record, serializer_class, enhanced_context)
        else:
            data = self.serialize_item(record, serializer_class, enhanced_context)
        return self.render_json({"data": data})

    return handler


def _build_rest_handler(
    base_action: str, base_context: dict, namespaced: bool, previous=None
):
    """
    generate_rest_responses 使用的处理函数模板

    :param base_action: 不带命名空间的 action
    :param base_context: 作为默认值的 context，请求时传入的 context 覆盖它
    :param namespaced: 是否带命名空间；带命名空间时在调用时查找 base_action 的处理函数
    :param previous: 不带命名空间时，安装前 base_action 已有的处理函数
    """

    def handler(self, record, serializer_class, context):
        enhanced_context = {**base_context, **context}

        if namespaced:
            target = type(self).get_response_definitions().get(base_action)
        else:
            target = previous

        if target is not None:
            return target(self, record, serializer_class, enhanced_context)
        return defaults.render_rest_fallback(
            self, base_action, record, serializer_class, enhanced_context
        )

    return handler


class RespondableMixin:
    # 别名声明：action -> action，与父类声明合并
    response_action_mappings: dict = {
        "list": "index",
        "retrieve": "show",
        "partial_update": "update",
    }

    # 处理函数注册表：action -> 函数，与父类注册表合并
    response_definitions: dict = {
        "index": defaults.render_index,
        "show": defaults.render_show,
        "create": defaults.render_create,
        "update": defaults.render_update,
        "destroy": defaults.render_destroy,
    }

    respond_for_index = defaults.render_index
    respond_for_show = defaults.render_show
    respond_for_create = defaults.render_create
    respond_for_update = defaults.render_update
    respond_for_destroy = defaults.render_destroy

    # 显式指定序列化器，为空时按控制器名推导
    response_serializer_class = None

    # 控制器名，为空时依次取 basename 与类名推导
    controller_name = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        declared_mappings = cls.__dict__.get("response_action_mappings", {})
        cls.response_action_mappings = {
            str(action): str(target) for action, target in declared_mappings.items()
        }

        own_definitions = dict(cls.__dict__.get("response_definitions", {}))
        collected = _collect_inherited_handlers(cls)
        collected.update(_collect_response_handlers(dict(vars(cls))))
        own_definitions.update(collected)
        cls.response_definitions = own_definitions

        # @response_for 标记的方法同时以 respond_for_<action> 的名称安装
        for action, func in collected.items():
            handler_name = handler_name_for(action)
            if (
                handler_name not in vars(cls)
                and inspect.getattr_static(cls, handler_name, None) is not func
            ):
                setattr(cls, handler_name, func)

    # ------------------------------------------------------------------
    # 注册表读取
    # ------------------------------------------------------------------

    @classmethod
    def get_response_action_mappings(cls) -> dict:
        """
        合并整条继承链上声明的别名，子类覆盖父类
        """
        mappings = {}
        for klass in reversed(cls.__mro__):
            mappings.update(vars(klass).get("response_action_mappings", {}))
        return mappings

    @classmethod
    def get_response_definitions(cls) -> dict:
        """
        合并整条继承链上注册的处理函数，子类覆盖父类
        """
        definitions = {}
        for klass in reversed(cls.__mro__):
            definitions.update(vars(klass).get("response_definitions", {}))
        return definitions

    @classmethod
    def has_response_handler(cls, handler_name: str) -> bool:
        action = action_from_handler_name(handler_name)
        return action is not None and action in cls.get_response_definitions()

    # ------------------------------------------------------------------
    # 配置接口：只在类配置阶段调用
    # ------------------------------------------------------------------

    @classmethod
    def map_response_action(cls, action, to):
        """
        声明一个别名

        Example:
            WidgetViewSet.map_response_action("public_index", to="index")
        """
        cls.map_response_actions({action: to})

    @classmethod
    def map_response_actions(cls, mappings: Mapping | None = None, **kwargs):
        """
        批量声明别名，与已有别名合并，同名 action 以最后一次为准

        Example:
            WidgetViewSet.map_response_actions({"public_index": "index"}, export_csv="custom_export")
        """
        merged = dict(vars(cls).get("response_action_mappings", {}))
        for action, target in {**(mappings or {}), **kwargs}.items():
            merged[str(action)] = str(target)
        cls.response_action_mappings = merged

    @classmethod
    def define_response_for(cls, action, handler=None):
        """
        为 action 安装处理函数

        可直接传入函数，也可以作为装饰器使用：

            @WidgetViewSet.define_response_for("dashboard")
            def dashboard(view, record, serializer_class, context):
                return view.render_json({"data": view.serialize_item(record, serializer_class, context)})
        """
        if handler is None:

            def decorator(func):
                cls.define_response_for(action, func)
                return func

            return decorator

        action = str(action)
        definitions = dict(vars(cls).get("response_definitions", {}))
        definitions[action] = handler
        cls.response_definitions = definitions
        setattr(cls, handler_name_for(action), handler)
        logger.debug("%s: response handler defined for %s", cls.__name__, action)
        return handler

    @classmethod
    def define_responses_for(cls, actions: Iterable, handler=None):
        """
        为多个 action 安装同一个处理函数
        """
        if handler is None:

            def decorator(func):
                cls.define_responses_for(actions, func)
                return func

            return decorator

        for action in actions:
            cls.define_response_for(action, handler)
        return handler

    @classmethod
    def define_crud_responses(
        cls,
        list_actions: Iterable = (),
        show_actions: Iterable = (),
        collection_context=None,
        item_context=None,
    ):
        """
        批量安装列表型与详情型处理函数

        collection_context / item_context 接收一个 RequestSnapshot，返回值为映射时合并进 context。

        Example:
            WidgetViewSet.define_crud_responses(
                list_actions=["index", "public_index"],
                show_actions=["show", "preview"],
                collection_context=lambda snapshot: {"meta": {"total": len(snapshot.record)}},
                item_context=lambda snapshot: {"access_level": "public"},
            )
        """
        for action in list_actions:
            cls.define_response_for(action, _build_crud_handler(True, collection_context))
        for action in show_actions:
            cls.define_response_for(action, _build_crud_handler(False, item_context))

    @classmethod
    def generate_rest_responses(
        cls,
        namespace: str | None = None,
        actions: Iterable = defaults.DEFAULT_REST_ACTIONS,
        context: Mapping | None = None,
    ):
        """
        生成一组 REST 风格的处理函数

        为每个 base_action 安装 <namespace>_<base_action>（无命名空间时为 base_action），
        处理时将 context 作为默认值合并到请求 context 之下，然后：
        - 已存在 base_action 的处理函数：委托给它
        - 否则使用内置的兜底行为（index/show/create/update/destroy），其他 action 返回 501

        未指定命名空间时，委托对象是安装前 base_action 已有的处理函数。

        Example:
            WidgetViewSet.generate_rest_responses(
                namespace="public",
                actions=["index", "show"],
                context={"access_level": "public"},
            )
        """
        base_context = dict(context or {})
        for base_action in actions:
            base_action = str(base_action)
            if namespace:
                handler = _build_rest_handler(base_action, base_context, True)
                cls.define_response_for(f"{namespace}_{base_action}", handler)
            else:
                previous = cls.get_response_definitions().get(base_action)
                handler = _build_rest_handler(
                    base_action, base_context, False, previous
                )
                cls.define_response_for(base_action, handler)

    # ------------------------------------------------------------------
    # 控制器信息
    # ------------------------------------------------------------------

    def get_current_action(self):
        """
        当前请求的 action，ViewSet 取 self.action，普通 APIView 取小写的 HTTP 方法名
        """
        action = getattr(self, "action", None)
        if action:
            return action
        request = getattr(self, "request", None)
        if request is not None:
            return request.method.lower()
        return None

    def get_response_action(self):
        """
        正在分发的 action（可能是 render_with 显式传入的），分发之外退回当前 action
        """
        return getattr(self, "_response_action", None) or self.get_current_action()

    def get_controller_name(self) -> str:
        return (
            self.controller_name
            or getattr(self, "basename", None)
            or controller_name_from_class(type(self).__name__)
        )

    def serialization_user(self) -> dict:
        """
        写入 context 的身份信息
        """
        request = getattr(self, "request", None)
        return {responses_settings.IDENTITY_CONTEXT_KEY: getattr(request, "user", None)}

    def get_requested_view(self):
        request = getattr(self, "request", None)
        if request is None:
            return None
        params = getattr(request, "query_params", None)
        if params is None:
            params = request.GET
        return params.get(responses_settings.VIEW_PARAM)

    def get_response_serializer_class(self):
        """
        获取序列化器

        优先使用 response_serializer_class，否则按 控制器名单数化 + 大驼峰 + 后缀 在注册表中查找，
        找不到时抛出 SerializerNotFoundError。
        """
        if self.response_serializer_class is not None:
            return self.response_serializer_class

        controller_name = self.get_controller_name()
        serializer_name = serializer_name_for(
            controller_name, responses_settings.SERIALIZER_SUFFIX
        )
        return SerializerRegistry.resolve(serializer_name, controller=controller_name)

    # ------------------------------------------------------------------
    # 序列化与输出
    # ------------------------------------------------------------------

    def serialize_item(self, item, serializer_class, context=None):
        return serialize_item(item, serializer_class, context)

    def serialize_collection(self, collection, serializer_class, context=None):
        return serialize_collection(collection, serializer_class, context)

    def render_json(self, data, status=None, headers=None):
        return Response(data, status=status, headers=headers)

    def render_invalid_action(self, action=None):
        action = action or self.get_current_action()
        logger.warning(
            "%s: action %s is not supported", type(self).__name__, action
        )
        return self.render_json(
            defaults.action_not_supported_payload(action, self.get_controller_name()),
            status=status.HTTP_400_BAD_REQUEST,
        )

    # ------------------------------------------------------------------
    # 分发
    # ------------------------------------------------------------------

    def get_response_handler(self, handler_name: str):
        """
        从注册表中取出处理函数并绑定到当前实例

        Raises:
            ResponseHandlerNotFound: 注册表中不存在该处理函数
        """
        action = action_from_handler_name(handler_name)
        handler = type(self).get_response_definitions().get(action)
        if handler is None:
            raise ResponseHandlerNotFound(action=action, handler_name=handler_name)
        return MethodType(handler, self)

    def render_with(
        self, record, *, action=None, context=None, serializer=None, responder=None
    ):
        """
        渲染 record

        ┌─────────────────────────────────────────────────────────────────┐
        │  action = 参数 action 或当前 action                              │
        │  context = 参数 context + 身份信息 (+ 请求参数中的 view)           │
        │  serializer_class = 参数 serializer 或按命名约定查找              │
        │                    │                                            │
        │          ┌─────────┴──────────┐                                 │
        │     有 responder           无 responder                          │
        │          │                    │                                 │
        │  responder.<action>()   resolve_handler_name                    │
        │  或 responder.render()        │                                 │
        │                         处理函数存在?                            │
        │                          /         \\                            │
        │                        是           否                           │
        │                        │             │                          │
        │                    调用处理函数   400 Action not supported         │
        └─────────────────────────────────────────────────────────────────┘

        :param record: 单个对象或集合
        :param action: 指定 action，默认当前 action
        :param context: 额外的上下文，其中的 view 优先于请求参数中的 view
        :param serializer: 指定序列化器类
        :param responder: Responder 类，传 True 时使用 DEFAULT_RESPONDER_CLASS
        :return: Response
        """
        explicit_action = action
        action = str(action or self.get_current_action())
        context = build_context(
            context, self.serialization_user(), self.get_requested_view()
        )
        serializer_class = serializer or self.get_response_serializer_class()
        self._response_action = action

        if responder:
            return self.render_with_responder(
                responder, record, serializer_class, context, explicit_action
            )

        handler_name = resolve_handler_name(
            action, type(self).get_response_action_mappings(), self.has_response_handler
        )
        try:
            handler = self.get_response_handler(handler_name)
        except ResponseHandlerNotFound as e:
            e.log(logger)
            return self.render_invalid_action(action)

        logger.debug("%s: %s handled by %s", type(self).__name__, action, handler_name)
        return handler(record, serializer_class, context)

    def render_with_responder(
        self, responder, record, serializer_class, context, action=None
    ):
        """
        交给 Responder 渲染，不经过处理函数解析

        指定了 action 且 Responder 公开了同名方法时调用该方法，否则调用 render()。
        """
        if responder is True:
            responder = responses_settings.DEFAULT_RESPONDER_CLASS
            if responder is None:
                raise ResponsesException(
                    message="DRF_RESPONSES['DEFAULT_RESPONDER_CLASS'] is not configured",
                    error_code=StandardErrorCodes.CONFIGURATION_ERROR,
                )

        instance = responder(self, record, serializer_class, context)
        if action and instance.has_action(str(action)):
            return getattr(instance, str(action))()
        return instance.render()
