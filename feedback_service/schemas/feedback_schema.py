from datetime import timezone

from marshmallow import Schema, fields, validate, EXCLUDE

RATING_RANGE = validate.Range(min=1, max=5)


class UTCDateTime(fields.DateTime):
    """ISO 8601 output with an explicit offset; naive values are stored as UTC."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)


def _sub_rating(key):
    return fields.Int(data_key=key, strict=True, allow_none=True, validate=RATING_RANGE)


class CreateFeedbackRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    event_id = fields.Str(data_key="eventId", required=True, validate=validate.Length(min=1))
    event_name = fields.Str(data_key="eventName", allow_none=True)
    user_id = fields.Str(data_key="userId", allow_none=True)
    user_name = fields.Str(data_key="userName", allow_none=True)
    content = fields.Str(allow_none=True)
    rating = fields.Int(required=True, strict=True, validate=RATING_RANGE)

    venue_rating = _sub_rating("venueRating")
    event_organization_rating = _sub_rating("eventOrganizationRating")
    staff_support_rating = _sub_rating("staffSupportRating")
    entertainment_quality_rating = _sub_rating("entertainmentQualityRating")
    food_and_beverages_rating = _sub_rating("foodAndBeveragesRating")
    value_for_money_rating = _sub_rating("valueForMoneyRating")

    category_id = fields.Int(data_key="categoryId", allow_none=True)
    category_name = fields.Str(data_key="categoryName", allow_none=True)
    is_anonymous = fields.Bool(data_key="isAnonymous", load_default=False)


class FeedbackSchema(Schema):
    """Outgoing feedback, for both stored entities and sample items."""

    id = fields.Str()
    event_id = fields.Str(data_key="eventId")
    event_name = fields.Str(data_key="eventName", allow_none=True)
    user_id = fields.Str(data_key="userId", allow_none=True)
    user_name = fields.Str(data_key="userName", allow_none=True)
    content = fields.Str(allow_none=True)
    rating = fields.Int()
    category_id = fields.Int(data_key="categoryId", allow_none=True)
    category_name = fields.Str(data_key="categoryName", allow_none=True)
    created_at = UTCDateTime(data_key="createdAt")
    is_anonymous = fields.Bool(data_key="isAnonymous")
