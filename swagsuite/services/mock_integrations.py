"""Canned payloads for integrations that are not wired to a real backend yet.

HubSpot, Slack, news monitoring, the team leaderboard and automation tasks
all return fixed data shaped like the real responses. Timestamps are
computed relative to the moment of the call.
"""


from datetime import datetime, timedelta, timezone
from typing import Any


def _ago(seconds: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(seconds=seconds)).isoformat()


def _ahead(seconds: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(seconds=seconds)).isoformat()


# -- Dashboard ---------------------------------------------------------------

def team_leaderboard() -> list[dict[str, Any]]:
    return [
        {
            "userId": "1",
            "name": "Sarah Johnson",
            "avatar": "SJ",
            "ytdRevenue": 850000,
            "mtdRevenue": 85000,
            "wtdRevenue": 20000,
            "ordersCount": 89,
            "conversionRate": 28.5,
            "contactsReached": 245,
            "meetingsHeld": 67,
            "rank": 1,
        },
        {
            "userId": "2",
            "name": "Mike Davis",
            "avatar": "MD",
            "ytdRevenue": 720000,
            "mtdRevenue": 72000,
            "wtdRevenue": 18000,
            "ordersCount": 76,
            "conversionRate": 25.2,
            "contactsReached": 198,
            "meetingsHeld": 54,
            "rank": 2,
        },
    ]


def automation_tasks() -> list[dict[str, Any]]:
    return [
        {
            "id": "1",
            "type": "vendor_followup",
            "title": "Follow up with XYZ Supplier on Order #12345",
            "description": "Order placed 2 days ago with no confirmation received. "
                           "Auto-generated follow-up ready.",
            "priority": "high",
            "scheduledFor": _ahead(3600),
            "status": "pending",
            "entityName": "XYZ Supplier",
        },
        {
            "id": "2",
            "type": "customer_outreach",
            "title": "Sample suggestion for ABC Corp",
            "description": "Customer has decreased orders by 40% - suggest sending product samples.",
            "priority": "medium",
            "scheduledFor": _ahead(7200),
            "status": "pending",
            "entityName": "ABC Corp",
        },
    ]


def news_alerts() -> list[dict[str, Any]]:
    return [
        {
            "id": "1",
            "headline": "ABC Corp announces Q4 record profits",
            "entityName": "ABC Corp",
            "entityType": "customer",
            "sentiment": "positive",
            "relevanceScore": 8,
            "publishedAt": _ago(1800),
        }
    ]


# -- HubSpot -----------------------------------------------------------------

def hubspot_status() -> dict[str, Any]:
    return {
        "lastSync": datetime.now(timezone.utc).isoformat(),
        "status": "active",
        "recordsProcessed": 150,
    }


def hubspot_metrics() -> dict[str, Any]:
    return {
        "totalContacts": 2847,
        "pipelineDeals": 89,
        "monthlyRevenue": 285000,
        "conversionRate": 24.5,
    }


def hubspot_sync(sync_type: str | None) -> dict[str, str]:
    return {"message": f"{sync_type or 'full'} sync initiated successfully"}


# -- Slack -------------------------------------------------------------------

def slack_channels() -> list[dict[str, Any]]:
    return [
        {"id": "general", "name": "general", "memberCount": 25, "isArchived": False},
        {"id": "sales", "name": "sales", "memberCount": 12, "isArchived": False},
        {"id": "production", "name": "production", "memberCount": 8, "isArchived": False},
        {"id": "alerts", "name": "alerts", "memberCount": 15, "isArchived": False},
    ]


def slack_messages() -> list[dict[str, Any]]:
    return [
        {
            "id": "1",
            "content": "New order from ABC Corp needs artwork approval",
            "user": "Sarah Johnson",
            "timestamp": _ago(300),
            "channel": "sales",
        },
        {
            "id": "2",
            "content": "Weekly production meeting at 2pm",
            "user": "Mike Davis",
            "timestamp": _ago(600),
            "channel": "production",
        },
    ]


def slack_send(channel: str | None, message: str | None) -> dict[str, str]:
    return {"message": "Message sent successfully to Slack"}


# -- News monitoring ---------------------------------------------------------

def news_items() -> list[dict[str, Any]]:
    return [
        {
            "id": "1",
            "headline": "ABC Corp announces major expansion into promotional products",
            "summary": "Leading tech company ABC Corp is expanding their corporate gifting "
                       "program with a $2M budget.",
            "sourceUrl": "https://example.com/news/abc-corp-expansion",
            "sentiment": "positive",
            "relevanceScore": 9,
            "entityType": "company",
            "entityName": "ABC Corp",
            "publishedAt": _ago(3600),
            "alertsSent": False,
        },
        {
            "id": "2",
            "headline": "Supply chain disruptions affecting promotional product industry",
            "summary": "Global supply chain issues are impacting delivery times for "
                       "promotional products.",
            "sourceUrl": "https://example.com/news/supply-chain",
            "sentiment": "negative",
            "relevanceScore": 7,
            "entityType": "industry",
            "publishedAt": _ago(7200),
            "alertsSent": True,
        },
    ]
