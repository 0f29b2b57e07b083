"""
GraphQL documents sent to the supergraph
"""

EVENTS_QUERY = """
query GetEvents($calendarId: ID, $limit: Int) {
  events(calendarId: $calendarId, limit: $limit) {
    entries {
      apiId
      event {
        id
        name
        startAt
        geoAddressJson {
          cityState
          fullAddress
        }
      }
    }
  }
}
"""

EVENT_GUESTS_QUERY = """
query GetEventGuests($eventId: ID!) {
  eventGuests(eventId: $eventId) {
    entries {
      guest {
        id
        checkedInAt
      }
    }
  }
}
"""
