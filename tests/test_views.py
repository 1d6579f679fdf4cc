"""Tests for the view registry and current view resolution."""

from make_theme.callbacks.registry import CallbackRegistry
from make_theme.compatibility.reporter import CompatibilityReporter
from make_theme.errors.schemas import ErrorCode
from make_theme.views.schemas import QueryContext
from make_theme.views.registry import ViewRegistry


def always():
    return True


def never():
    return False


def test_builtin_views_loaded_in_order(views):
    assert list(views.get_views()) == ["blog", "archive", "search", "page", "post"]
    assert views.get_views("label")["blog"] == "Blog (Post Page)"
    assert views.get_views("priority") == {
        "blog": 10,
        "archive": 10,
        "search": 10,
        "page": 10,
        "post": 10,
    }


def test_add_view_fills_defaults(empty_views, errors):
    assert empty_views.add_view("my_custom-view", {"callback": never})

    view = empty_views.get_views()["my_custom-view"]
    assert view["label"] == "My Custom View"
    assert view["priority"] == 10
    assert errors.count() == 0


def test_add_view_without_callback_is_invalid(empty_views, errors):
    assert empty_views.add_view("bare") is False
    assert not empty_views.view_exists("bare")
    assert errors.get_codes() == [ErrorCode.INVALID_CALLBACK]


def test_add_view_with_unknown_callback_name_is_invalid(empty_views, errors):
    assert empty_views.add_view("shop", {"callback": "is_shop"}) is False
    assert errors.get_codes() == [ErrorCode.INVALID_CALLBACK]


def test_add_view_with_registered_callback_name(empty_views):
    empty_views.predicates.register("is_shop", always)
    assert empty_views.add_view("shop", {"label": "Shop", "callback": "is_shop"})
    assert empty_views.get_predicate("shop") is always


def test_add_existing_view_without_overwrite(views, errors):
    views.load()
    assert views.add_view("page", {"callback": always}) is False
    assert views.get_views("callback")["page"] == "callback_page"
    assert errors.get_codes() == [ErrorCode.ALREADY_EXISTS]


def test_overwrite_keeps_existing_properties(views):
    views.load()
    assert views.add_view("page", {"priority": 30}, overwrite=True)

    page = views.get_views()["page"]
    assert page["priority"] == 30
    assert page["label"] == "Pages"
    assert page["callback"] == "callback_page"


def test_overwrite_with_invalid_callback_is_rejected(views, errors):
    views.load()
    assert views.add_view("page", {"callback": "nope"}, overwrite=True) is False
    assert views.get_views("callback")["page"] == "callback_page"
    assert errors.get_codes() == [ErrorCode.INVALID_CALLBACK]


def test_remove_view(views, errors):
    views.load()
    assert views.remove_view("search")
    assert not views.view_exists("search")
    assert views.remove_view("search") is False
    assert errors.count() == 1


def test_view_label(views):
    assert views.get_view_label("archive") == "Archives"
    assert views.get_view_label("missing") == ""


def test_sorted_views_by_priority_stable(empty_views):
    empty_views.add_view("a", {"callback": never, "priority": 10})
    empty_views.add_view("b", {"callback": never, "priority": 5})
    empty_views.add_view("c", {"callback": never, "priority": 10})
    empty_views.add_view("d", {"callback": never, "priority": "1"})

    first = list(empty_views.get_sorted_views())
    second = list(empty_views.get_sorted_views())

    assert first == ["d", "b", "a", "c"]
    assert second == first


def test_later_higher_priority_match_wins(empty_views, hooks):
    empty_views.add_view("page", {"callback": always, "priority": 20})
    empty_views.add_view("post", {"callback": always, "priority": 10})
    hooks.do_action("template_redirect")

    assert empty_views.get_current_view() == "page"
    assert empty_views.is_current_view("page")


def test_no_match_returns_default_view(empty_views, hooks, errors):
    empty_views.add_view("page", {"callback": never})
    hooks.do_action("template_redirect")

    assert empty_views.get_current_view() == "post"
    assert errors.count() == 0


def test_only_true_counts_as_match(empty_views, hooks):
    empty_views.add_view("truthy", {"callback": lambda: 1, "priority": 20})
    hooks.do_action("template_redirect")

    assert empty_views.get_current_view() == "post"


def test_current_view_before_routing_is_reported(empty_views, errors, compatibility):
    empty_views.add_view("page", {"callback": always})

    assert empty_views.get_current_view() == "page"
    assert errors.get_codes() == [ErrorCode.MISUSE_CALLED_TOO_EARLY]
    notices = compatibility.get_notices()
    assert len(notices) == 1
    assert notices[0].name == "get_current_view"


def test_deprecated_view_filter_still_applies(views, hooks, errors):
    hooks.add_filter("make_get_view", lambda view, parent: f"{view}-{parent}")
    hooks.do_action("template_redirect")
    views.set_query_context(
        QueryContext(is_attachment=True, parent_post_type="page")
    )

    assert views.get_current_view() == "page-page"
    assert errors.get_codes() == [ErrorCode.DEPRECATED_HOOK]


def test_builtin_predicates(views, hooks):
    hooks.do_action("template_redirect")

    cases = [
        (QueryContext(), "post"),
        (QueryContext(is_home=True), "blog"),
        (QueryContext(is_archive=True), "archive"),
        (QueryContext(is_search=True), "search"),
        (QueryContext(is_page=True, is_singular=True, post_type="page"), "page"),
        (QueryContext(is_attachment=True, is_singular=True, parent_post_type="page"), "page"),
        (QueryContext(is_singular=True, post_type="post"), "post"),
        (
            QueryContext(is_singular=True, post_type="product", public_post_types=["product"]),
            "post",
        ),
    ]
    for context, expected in cases:
        views.set_query_context(context)
        assert views.get_current_view() == expected, context


def test_callback_post_rejects_private_post_types(views):
    views.set_query_context(QueryContext(is_singular=True, post_type="secret"))
    assert views.conditionals.callback_post() is False

    views.set_query_context(
        QueryContext(is_attachment=True, parent_post_type="product", public_post_types=["product"])
    )
    assert views.conditionals.callback_post() is True


def test_loaded_action_can_add_view(views, hooks):
    hooks.add_action(
        "make_view_loaded",
        lambda registry: registry.add_view("shop", {"callback": always, "priority": 15}),
    )

    assert list(views.get_sorted_views())[-1] == "shop"


def test_list_summaries(views):
    views.load()
    views.add_view("custom", {"callback": always, "priority": 5})

    summaries = views.list_summaries()

    assert summaries[0].view_key == "custom"
    assert summaries[0].callback == "always"
    assert summaries[-1].view_key == "post"
    assert summaries[-1].callback == "callback_post"


def test_registries_sharing_predicates_keep_their_own_context(errors, hooks):
    shared = CallbackRegistry()
    compatibility = CompatibilityReporter(errors)
    home = ViewRegistry(
        errors, compatibility, hooks, predicates=shared, context=QueryContext(is_home=True)
    )
    search = ViewRegistry(
        errors, compatibility, hooks, predicates=shared, context=QueryContext(is_search=True)
    )
    hooks.do_action("template_redirect")

    assert home.get_current_view() == "blog"
    assert search.get_current_view() == "search"
    assert "is_home" not in shared
    assert shared.list_names() == []


def test_shared_predicate_overrides_builtin_name(errors, compatibility, hooks):
    shared = CallbackRegistry({"is_search": always})
    views = ViewRegistry(errors, compatibility, hooks, predicates=shared)
    hooks.do_action("template_redirect")

    assert views.get_predicate("search") is always
    assert views.get_current_view() == "search"
