from sharedconf.pipeline.items import LoadedItem, load_item, load_items

__all__ = ["LoadedItem", "load_item", "load_items"]
