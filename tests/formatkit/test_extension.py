import asyncio
from unittest import mock

import pytest

from formatkit.exceptions import MissingPublishCallbackError
from formatkit.responses import Collector, ResourceResponses, attach_to


def render_text(text):
    return lambda controller: f"{text}:{controller.name}"


class StubController(ResourceResponses):
    """Controller whose ``respond_to`` hands over a test double, like a host framework would."""

    name = "stub"
    responder = None

    def respond_to(self, configure):
        configure(self.responder)
        return "responded"


@pytest.fixture
def klass():
    class Controller(StubController):
        pass

    return Controller


@pytest.fixture
def instance(klass, responder):
    controller = klass()
    controller.responder = responder
    return controller


class TestExtendingTheController:
    def test_responses_returns_a_collector(self, klass):
        assert isinstance(klass.responses(), Collector)
        assert klass.responses() is klass.responses()

    def test_responses_passes_collector_to_configure(self, klass):
        seen = []
        returned = klass.responses(seen.append)

        assert seen == [returned]
        assert isinstance(returned, Collector)

    def test_instance_surface(self, instance):
        assert callable(instance.response_for)
        assert callable(instance.wrap)

    def test_duplicates_on_inheritance(self, klass):
        klass.responses().get("plural").register_format("html")

        class Subclass(klass):
            pass

        assert Subclass.responses() is not klass.responses()
        assert Subclass.responses().get("plural") is not klass.responses().get("plural")
        assert Subclass.responses().get("plural").block_order == ["html"]

    def test_subclass_changes_do_not_leak(self, klass):
        klass.responses().get("plural").register_format("html")

        class Child(klass):
            pass

        class Sibling(klass):
            pass

        Child.responses().get("plural").register_format("iphone")
        Child.responses().get("singular")

        assert klass.responses().get("plural").block_order == ["html"]
        assert Sibling.responses().get("plural").block_order == ["html"]
        assert "singular" not in klass.responses()

    def test_parent_changes_after_subclassing_do_not_leak(self, klass):
        klass.responses().get("plural").register_format("html")

        class Child(klass):
            pass

        klass.responses().get("plural").register_format("xml")

        assert Child.responses().get("plural").block_order == ["html"]

    def test_lazy_subclass_without_configured_parent(self, klass):
        class Child(klass):
            pass

        assert "_formatkit_responses" not in Child.__dict__
        assert Child.responses() is not klass.responses()

    def test_configure_responses_hook_runs_at_class_creation(self):
        class Configured(StubController):
            @classmethod
            def configure_responses(cls, r):
                r.get("plural").publish("xml", "json", callback=render_text("pub"))

        class Inheriting(Configured):
            pass

        assert Configured.responses().get("plural").publish_formats == ["xml", "json"]
        assert Inheriting.responses().get("plural").publish_formats == ["xml", "json"]
        assert Inheriting.responses() is not Configured.responses()

    def test_configuration_errors_surface_at_class_creation(self):
        with pytest.raises(MissingPublishCallbackError):

            class Broken(StubController):
                @classmethod
                def configure_responses(cls, r):
                    r.get("plural").publish("json")


class TestRespondingToConfiguredFormats:
    @pytest.fixture(autouse=True)
    def default(self, klass):
        self.default_block = render_text("Hello, world!")
        klass.responses(lambda r: r.get("plural").default(self.default_block))

    def test_wrap_evaluates_with_controller_context(self, instance):
        instance.name = "foo"
        assert instance.wrap(lambda controller: controller.name)() == "foo"

    def test_wrap_passes_call_arguments_through(self, instance):
        wrapped = instance.wrap(lambda controller, a, b=0: (controller, a, b))
        assert wrapped(1, b=2) == (instance, 1, 2)

    def test_default_block_applies_to_any(self, instance, responder):
        assert instance.response_for("plural") == "responded"

        responder.format.assert_not_called()
        responder.any.assert_called_once()
        (handler,), _ = responder.any.call_args
        assert handler() == "Hello, world!:stub"

    def test_published_formats_before_default(self, klass, instance, responder):
        pblock = render_text("bar")
        klass.responses().get("plural").publish("xml", "json", callback=pblock)

        with mock.patch.object(instance, "wrap", side_effect=lambda cb: cb) as wrap:
            instance.response_for("plural")

        assert wrap.call_args_list == [mock.call(pblock), mock.call(pblock), mock.call(self.default_block)]
        assert responder.mock_calls == [
            mock.call.format("xml", pblock),
            mock.call.format("json", pblock),
            mock.call.any(self.default_block),
        ]

    def test_custom_formats_before_published_and_default(self, klass, instance, responder):
        iblock, pblock = render_text("baz"), render_text("bar")
        klass.responses().get("plural").register_format("iphone", iblock)
        klass.responses().get("plural").publish("xml", callback=pblock)

        with mock.patch.object(instance, "wrap", side_effect=lambda cb: cb):
            instance.response_for("plural")

        assert responder.mock_calls == [
            mock.call.format("iphone", iblock),
            mock.call.format("xml", pblock),
            mock.call.any(self.default_block),
        ]

    def test_any_applied_without_handler_when_default_blank(self, klass, instance, responder):
        klass.responses().get("plural").default_callback = None

        instance.response_for("plural")

        assert responder.mock_calls == [mock.call.any()]

    def test_custom_format_without_block(self, klass, instance, responder):
        klass.responses().get("plural").register_format("iphone")

        with mock.patch.object(instance, "wrap", side_effect=lambda cb: cb) as wrap:
            instance.response_for("plural")

        wrap.assert_called_once_with(self.default_block)
        assert responder.mock_calls == [mock.call.format("iphone"), mock.call.any(self.default_block)]

    def test_unconfigured_action_still_reaches_any(self, instance, responder):
        instance.response_for("never_configured")

        assert responder.mock_calls == [mock.call.any()]

    def test_response_for_records_action_name(self, instance):
        instance.response_for("plural")
        assert instance.action_name == "plural"

    def test_aresponse_for(self, instance, responder):
        assert asyncio.run(instance.aresponse_for("plural")) == "responded"
        responder.any.assert_called_once()


class TestEndToEnd:
    def test_published_and_default_in_strict_order(self, klass, instance, responder):
        a, d = render_text("A"), render_text("D")

        def configure(r):
            r.get("plural").publish("xml", "json", callback=a)
            r.get("plural").default(d)

        klass.responses(configure)
        instance.response_for("plural")

        names = [c[0] for c in responder.mock_calls]
        handlers = [c.args[-1]() for c in responder.mock_calls]
        assert names == ["format", "format", "any"]
        assert [c.args[0] for c in responder.mock_calls[:2]] == ["xml", "json"]
        assert handlers == ["A:stub", "A:stub", "D:stub"]


class TestDefaultRespondTo:
    def test_hooks_must_be_supplied_by_host(self):
        class Bare(ResourceResponses):
            pass

        with pytest.raises(NotImplementedError):
            Bare().response_for("index")

    def test_format_responder_uses_host_hooks(self):
        class Host(ResourceResponses):
            @classmethod
            def configure_responses(cls, r):
                r.get("index").publish("json", callback=lambda c: {"ok": True})
                r.get("index").register_format("csv")

            def get_requested_formats(self):
                return self.requested

            def render_format(self, fmt):
                return f"template:{self.action_name}.{fmt}"

        host = Host()
        host.requested = ["json"]
        assert host.response_for("index") == {"ok": True}

        host.requested = ["csv"]
        assert host.response_for("index") == "template:index.csv"


class TestAttachTo:
    def test_attach_to_plain_class(self):
        @attach_to
        class Plain:
            def respond_to(self, configure):
                configure(self.responder)
                return "plain"

        Plain.responses().get("plural").register_format("html")

        class Child(Plain):
            pass

        Child.responses().get("plural").register_format("iphone")

        assert isinstance(Plain.responses(), Collector)
        assert Plain.responses().get("plural").block_order == ["html"]
        assert Child.responses().get("plural").block_order == ["html", "iphone"]

        child = Child()
        child.responder = mock.Mock(spec=["format", "any"])
        assert child.response_for("plural") == "plain"
        assert child.responder.mock_calls == [
            mock.call.format("html"),
            mock.call.format("iphone"),
            mock.call.any(),
        ]

    def test_attach_to_keeps_existing_init_subclass(self):
        seen = []

        @attach_to
        class Tracked:
            def __init_subclass__(cls, **kwargs):
                super().__init_subclass__(**kwargs)
                seen.append(cls.__name__)

        Tracked.responses().get("index").register_format("html")

        class Child(Tracked):
            pass

        assert seen == ["Child"]
        assert Child.responses() is not Tracked.responses()
        assert Child.responses().get("index").block_order == ["html"]

    def test_attach_to_mixin_subclass_is_noop(self, klass):
        assert attach_to(klass) is klass
