import pytest


def test_exposes_sample_content(storefront_vm):
    assert storefront_vm.greeting == "Good morning,"
    assert storefront_vm.user_name == "Revy"
    assert storefront_vm.balance == "$12.75"
    assert storefront_vm.promo_title == "New Pineapple Passionfruit Drink"
    assert [f.name for f in storefront_vm.favorites] == [
        "Caramel Macchiato",
        "Iced Brown Sugar Oatmilk",
        "Chocolate Croissant",
    ]


def test_home_tab_is_selected_by_default(storefront_vm):
    assert storefront_vm.selected_tab == 0
    assert storefront_vm.selected_nav_item.label == "Home"


def test_select_tab(storefront_vm):
    storefront_vm.select_tab(3)

    assert storefront_vm.selected_tab == 3
    assert storefront_vm.selected_nav_item.label == "Gift"


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_out_of_range_tab_is_ignored(storefront_vm, index):
    storefront_vm.select_tab(2)

    storefront_vm.select_tab(index)

    assert storefront_vm.selected_tab == 2


@pytest.mark.parametrize("action", ["Add money", "Scan in store", "Order Now"])
def test_press_action_records_it(storefront_vm, action):
    storefront_vm.press_action(action)
    assert storefront_vm.last_action == action


def test_unknown_action_is_ignored(storefront_vm):
    storefront_vm.press_action("Delete account")
    assert storefront_vm.last_action is None
