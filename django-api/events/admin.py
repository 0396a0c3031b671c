from django.contrib import admin

from events.models import StoredItem


@admin.register(StoredItem)
class StoredItemAdmin(admin.ModelAdmin):
    list_display = ["scope", "key", "updated_at"]
    list_filter = ["scope"]
    search_fields = ["key"]
    readonly_fields = ["created_at", "updated_at"]
