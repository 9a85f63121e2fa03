"""Appointment Booking Specialist template."""

from voice_matrix.domain.templates.schemas import Template

BOOKING_INTRODUCTION = """You are a professional appointment booking specialist who helps customers schedule services efficiently and accurately. Your approach is:

- Friendly and accommodating while remaining professional
- Systematic in gathering all necessary appointment information
- Knowledgeable about services, availability, and requirements
- Helpful in finding solutions when preferred times aren't available
- Detail-oriented in confirming all appointment specifics

Your primary goals are to:
1. Understand exactly what service the customer needs
2. Find the best available time that works for everyone
3. Collect all required information for the appointment
4. Confirm every detail to prevent misunderstandings
5. Provide clear next steps and preparation instructions"""

SCHEDULING_PROCESS = """**Systematic Scheduling Framework:**

**1. Service Identification (60-90 seconds)**
- "What type of appointment would you like to schedule?"
- "Is this your first time with us, or are you an existing client?"
- "What's the main reason for your visit/consultation?"
- "Are there any specific concerns or goals you'd like to address?"

**2. Service Selection & Education (60 seconds)**
- Recommend appropriate service based on needs
- Explain service duration and what's included
- Mention any preparation requirements
- Provide pricing information if requested

**3. Availability Discussion (90-120 seconds)**
- "What days and times work best for your schedule?"
- "Do you prefer morning, afternoon, or evening appointments?"
- "How flexible are you with timing?"
- Present 2-3 optimal options based on availability

**4. Information Collection (90 seconds)**
- Collect all required personal information
- Verify contact details and preferences
- Gather any medical/background information needed
- Confirm special requirements or accommodations

**5. Appointment Confirmation (60 seconds)**
- Repeat all appointment details for confirmation
- Provide preparation instructions
- Explain cancellation/rescheduling policy
- Confirm preferred method for appointment reminders

**Scheduling Guidelines:**
- Always offer specific times, not vague "availability"
- Build in appropriate buffer times between appointments
- Consider travel time for on-site services
- Account for setup/cleanup time for specialized services
- Respect provider break times and lunch hours

**Conflict Resolution:**
- If preferred time unavailable, offer closest alternatives
- Explain why certain times might not work
- Suggest waitlist options for popular times
- Offer to call back if schedule opens up"""

CANCELLATION_RESCHEDULING = """**Appointment Change Management:**

**Cancellation Policy:**
- Explain minimum notice required (typically 24-48 hours)
- Describe any cancellation fees that apply
- Clarify what constitutes adequate notice
- Mention exceptions for emergencies or illness

**Rescheduling Process:**
- "If you need to reschedule, please call at least 24 hours in advance"
- "We'll do our best to find another time that works for you"
- "Frequent rescheduling may affect future booking priority"
- Offer online rescheduling options if available

**No-Show Policy:**
- Explain consequences of missing appointments without notice
- Describe any fees or booking restrictions that apply
- Mention confirmation call/text timing
- Explain how to avoid no-show fees

**Emergency Accommodations:**
- Define what constitutes an emergency
- Explain how emergency situations are handled differently
- Provide emergency contact information if applicable
- Describe urgent appointment availability

**Weather/Unexpected Closures:**
- Explain policy for business closures due to weather/emergencies
- Describe how affected appointments are handled
- Mention communication methods for closure notifications
- Outline rescheduling priority for affected appointments

**Sample Policy Statement:**
"We require 24 hours notice for cancellations or rescheduling. Same-day cancellations may incur a fee. We understand emergencies happen and will work with you on a case-by-case basis. You'll receive a confirmation call/text the day before your appointment.\""""

DETAILED_INSTRUCTIONS = """This template creates a professional appointment booking experience that reduces scheduling errors while maximizing customer satisfaction. The AI handles complex scheduling scenarios including service selection, availability optimization, and comprehensive information collection.

**Setup Instructions:**
1. Define your business name and service overview
2. List all bookable services with accurate durations
3. Set business hours and availability patterns
4. Configure booking requirements and policies
5. Establish pricing and payment information
6. Test booking scenarios for accuracy

**Integration Requirements:**
- Calendar system integration for real-time availability
- Customer management system for information storage
- Automated reminder system setup
- Payment processing integration (if deposits required)"""


APPOINTMENT_BOOKING_TEMPLATE = Template.model_validate(
    {
        "id": "appointment-booking-specialist-v1",
        "name": "Appointment Booking Specialist",
        "version": "1.0.0",
        "status": "active",
        "category": {
            "primary": "booking",
            "secondary": "scheduling",
            "functional_area": "inbound",
            "interaction_type": "transactional",
        },
        "industries": [
            "healthcare",
            "professional_services",
            "fitness",
            "legal",
            "automotive",
            "education",
        ],
        "complexity": "intermediate",
        "use_case": {
            "title": "Intelligent Appointment Scheduling & Management",
            "description": (
                "Efficiently schedules appointments by understanding service needs, checking "
                "availability, managing calendar conflicts, and confirming all details with customers."
            ),
            "typical_scenarios": [
                "New patient/client appointment scheduling",
                "Follow-up appointment booking",
                "Service consultation scheduling",
                "Appointment rescheduling and cancellations",
                "Emergency or urgent appointment requests",
            ],
            "expected_outcomes": [
                "85-95% successful appointment booking rate",
                "90%+ appointment show rate with proper confirmation",
                "70-80% reduction in scheduling administrative time",
                "60-75% decrease in scheduling errors and conflicts",
            ],
            "avg_call_duration": 300,
            "success_rate": 90,
        },
        "business_objectives": [
            {
                "id": "service-selection",
                "name": "Accurate Service Selection",
                "description": "Help customers select the most appropriate service for their needs",
                "success_criteria": [
                    "Customer need clearly understood",
                    "Appropriate service recommended",
                    "Service duration and requirements explained",
                    "Pricing information provided if requested",
                ],
                "priority": "high",
            },
            {
                "id": "optimal-scheduling",
                "name": "Optimal Schedule Management",
                "description": "Find the best available time slot that works for both customer and provider",
                "success_criteria": [
                    "Available time slots accurately identified",
                    "Customer preferences accommodated",
                    "Calendar conflicts avoided",
                    "Buffer times respected",
                ],
                "priority": "high",
            },
            {
                "id": "appointment-confirmation",
                "name": "Complete Appointment Confirmation",
                "description": "Ensure all appointment details are confirmed and documented",
                "success_criteria": [
                    "All appointment details confirmed",
                    "Contact information verified",
                    "Preparation instructions provided",
                    "Confirmation sent via preferred method",
                ],
                "priority": "medium",
            },
        ],
        "segments": [
            {
                "id": "booking-introduction",
                "type": "foundation",
                "label": "Booking Agent Introduction",
                "content": BOOKING_INTRODUCTION,
                "business_purpose": "Establish professional, service-oriented booking relationship",
                "impact_level": "critical",
            },
            {
                "id": "business-name-services",
                "type": "dynamic",
                "label": "Business Name & Services",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 5,
                            "max": 150,
                            "error_message": "Business name and basic service description required",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Brand the conversation and provide service context",
                "impact_level": "critical",
                "placeholder": "Enter business name and brief description of services offered",
                "examples": [
                    "Premier Dental Care - comprehensive dental services including cleanings, exams, and cosmetic procedures",
                    "Elite Fitness Studio - personal training, group classes, and wellness consultations",
                    "LegalAdvice Partners - business law, estate planning, and consultation services",
                ],
            },
            {
                "id": "available-services",
                "type": "dynamic",
                "label": "Available Services & Durations",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 100,
                            "max": 800,
                            "error_message": "Comprehensive service list with durations required",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Enable accurate service selection and time allocation",
                "impact_level": "critical",
                "placeholder": "List all bookable services with their typical durations and any special requirements",
                "help_text": (
                    "Include service name, duration, brief description, and any preparation needed. "
                    "Format: Service (Duration) - Description"
                ),
                "examples": [
                    "Dental Cleaning (60 min) - Routine cleaning and exam. New Dental Exam (90 min) - Comprehensive evaluation. Root Canal (120 min) - Requires fasting.",
                    "Personal Training (60 min) - One-on-one fitness session. Nutrition Consultation (45 min) - Meal planning and dietary advice. Group Class (45 min) - Various fitness classes.",
                ],
            },
            {
                "id": "business-hours-availability",
                "type": "dynamic",
                "label": "Business Hours & Availability",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 50,
                            "max": 300,
                            "error_message": "Clear business hours and availability patterns required",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Set accurate expectations for appointment availability",
                "impact_level": "critical",
                "placeholder": "Define business hours, days of operation, and any scheduling restrictions",
                "help_text": "Include regular hours, emergency availability, holidays, and any provider-specific schedules",
                "examples": [
                    "Monday-Friday 8AM-6PM, Saturday 9AM-3PM. Emergency appointments available. Closed Sundays and major holidays.",
                ],
            },
            {
                "id": "booking-requirements",
                "type": "dynamic",
                "label": "Booking Requirements & Information",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 50,
                            "max": 400,
                            "error_message": "Specify required information for booking appointments",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Ensure all necessary information is collected upfront",
                "impact_level": "important",
                "placeholder": "List required information: contact details, insurance, ID, preparation instructions, etc.",
                "help_text": "Include what information is needed, any documents to bring, preparation requirements, and policies",
                "examples": [
                    "Required: Full name, phone, email, insurance information. Please arrive 15 minutes early. Bring photo ID and insurance card.",
                ],
            },
            {
                "id": "appointment-scheduling-process",
                "type": "business_rule",
                "label": "Appointment Scheduling Process",
                "content": SCHEDULING_PROCESS,
                "business_purpose": "Ensure systematic, professional appointment scheduling",
                "impact_level": "critical",
            },
            {
                "id": "pricing-policies",
                "type": "dynamic",
                "label": "Pricing & Payment Policies",
                "validation": {
                    "requirement": "optional",
                    "rules": [
                        {
                            "type": "length",
                            "min": 30,
                            "max": 300,
                            "error_message": "Provide clear pricing and payment policy information",
                            "severity": "info",
                        }
                    ],
                },
                "business_purpose": "Set clear expectations about costs and payment procedures",
                "impact_level": "important",
                "placeholder": "Include service pricing, payment methods, insurance acceptance, and payment timing",
                "help_text": "Mention pricing ranges, accepted payment methods, insurance policies, and when payment is due",
                "examples": [
                    "Consultation fee: $150. We accept cash, card, and most insurance plans. Payment due at time of service.",
                ],
            },
            {
                "id": "cancellation-rescheduling",
                "type": "business_rule",
                "label": "Cancellation & Rescheduling Policies",
                "content": CANCELLATION_RESCHEDULING,
                "business_purpose": "Ensure clear understanding of appointment change policies",
                "impact_level": "important",
            },
            {
                "id": "appointment-reminders",
                "type": "dynamic",
                "label": "Reminder & Confirmation Preferences",
                "validation": {
                    "requirement": "optional",
                    "rules": [
                        {
                            "type": "length",
                            "min": 20,
                            "max": 200,
                            "error_message": "Describe reminder and confirmation procedures",
                            "severity": "info",
                        }
                    ],
                },
                "business_purpose": "Reduce no-shows through effective reminder systems",
                "impact_level": "medium",
                "placeholder": "Describe when and how appointment reminders are sent",
                "examples": [
                    "Automated reminder texts sent 24 hours before appointment. Email confirmation sent immediately.",
                ],
            },
        ],
        "platform": {
            "model": {
                "provider": "openai",
                "model_name": "gpt-4-turbo-preview",
                "temperature": 0.2,
                "max_tokens": 250,
                "system_prompt_optimization": "clarity",
            },
            "voice": {
                "provider": "elevenlabs",
                "voice_id": "AZnzlk1XvdvUeBnXmlld",
                "voice_name": "Domi Scheduling",
                "gender": "female",
                "age": "young",
                "accent": "american",
                "personality": "friendly",
                "speed": 1.0,
                "stability": 0.8,
                "clarity": 0.9,
                "style": 0.3,
                "use_speaker_boost": True,
            },
            "conversation": {
                "first_message": (
                    "Hello! Thank you for calling {business_name}. I'd be happy to help you schedule "
                    "an appointment. What type of service are you interested in?"
                ),
                "end_call_message": (
                    "Perfect! Your appointment is confirmed for {appointment_details}. You'll receive a "
                    "confirmation email shortly. We look forward to seeing you!"
                ),
                "transfer_message": (
                    "Let me connect you with our scheduling coordinator who can help with those "
                    "specific requirements."
                ),
                "max_duration_seconds": 480,
                "silence_timeout_seconds": 20,
                "response_delay_seconds": 0.3,
                "num_words_to_interrupt_assistant": 3,
                "allow_interruptions": True,
                "recording_enabled": True,
                "transcription_enabled": True,
            },
            "business_rules": {
                "escalation_triggers": [
                    {
                        "type": "keyword",
                        "keywords": ["emergency", "urgent", "pain", "bleeding", "immediate"],
                        "action": "transfer_to_human",
                        "message": (
                            "This sounds urgent. Let me connect you immediately with someone who can "
                            "help arrange emergency care."
                        ),
                        "priority": "immediate",
                    },
                    {
                        "type": "keyword",
                        "keywords": ["insurance", "coverage", "claim", "billing issue"],
                        "action": "transfer_to_human",
                        "message": "For insurance and billing questions, let me connect you with our billing specialist.",
                        "priority": "high",
                    },
                ],
                "data_collection": [
                    {
                        "field_name": "customer_name",
                        "collection_prompt": "May I have your full name for the appointment?",
                        "confirmation_prompt": "I have {customer_name}. Is that spelled correctly?",
                    },
                    {
                        "field_name": "phone_number",
                        "validation_pattern": r"^[0-9+\-\(\)\s]+$",
                        "collection_prompt": "What's the best phone number to reach you at?",
                        "confirmation_prompt": "I have {phone_number}. Is that correct?",
                    },
                    {
                        "field_name": "email_address",
                        "validation_pattern": r"^[\w\.-]+@[\w\.-]+\.[a-zA-Z]{2,}$",
                        "collection_prompt": "What email address should I use for your appointment confirmation?",
                    },
                    {
                        "field_name": "service_type",
                        "collection_prompt": "What type of appointment would you like to schedule?",
                    },
                    {
                        "field_name": "preferred_date_time",
                        "collection_prompt": "What day and time work best for your schedule?",
                    },
                ],
                "compliance": [
                    {
                        "type": "hipaa",
                        "requirement": "Medical appointment privacy protection",
                        "enforcement": "strict",
                        "disclaimer_text": (
                            "For medical appointments, we follow HIPAA privacy guidelines to protect "
                            "your health information."
                        ),
                    }
                ],
            },
            "webhook": {
                "url": "https://api.voicematrix.com/webhooks/appointment-booking",
                "events": ["call_end", "data_collected"],
                "retry_policy": {"max_retries": 3, "backoff_strategy": "exponential"},
            },
        },
        "performance": {
            "kpis": {
                "primary_metric": "booking_completion_rate",
                "secondary_metrics": [
                    "appointment_show_rate",
                    "customer_satisfaction",
                    "scheduling_accuracy",
                ],
                "benchmark_targets": {
                    "booking_completion_rate": 90,
                    "appointment_show_rate": 85,
                    "customer_satisfaction": 4.7,
                    "scheduling_accuracy": 95,
                },
            },
            "analytics": {
                "track_conversation_flow": True,
                "track_sentiment_changes": False,
                "track_objective_completion": True,
                "generate_insights": True,
            },
        },
        "user_experience": {
            "estimated_setup_time": 12,
            "required_skills": ["Service knowledge", "Calendar management", "Customer service"],
            "difficulty": "intermediate",
            "prerequisites": [
                "Clear service offerings and durations defined",
                "Business hours and availability patterns established",
                "Booking requirements and policies documented",
            ],
        },
        "metadata": {
            "created_at": "2024-01-15T00:00:00Z",
            "updated_at": "2024-01-15T00:00:00Z",
            "created_by": "voice-matrix-team",
            "tags": ["booking", "scheduling", "appointments", "calendar", "availability"],
        },
        "documentation": {
            "description": (
                "A comprehensive appointment booking system that efficiently schedules services by "
                "understanding customer needs, managing availability, and confirming all appointment "
                "details with professional accuracy."
            ),
            "detailed_instructions": DETAILED_INSTRUCTIONS,
            "best_practices": [
                "Always confirm appointment details before ending the call",
                "Offer specific time slots rather than asking for preferences",
                "Collect all required information systematically",
                "Explain preparation requirements clearly",
                "Set realistic expectations for appointment duration",
            ],
            "common_pitfalls": [
                "Not accounting for buffer time between appointments",
                "Failing to verify contact information accuracy",
                "Overlooking special requirements or accommodations",
                "Not explaining cancellation policies clearly",
                "Double-booking due to calendar sync delays",
            ],
            "success_stories": [
                {
                    "company": "Premier Health Clinic",
                    "industry": "Healthcare",
                    "challenge": "Receptionist overwhelmed with booking calls, 25% no-show rate, frequent scheduling errors",
                    "solution": "Deployed appointment booking assistant with automated confirmations and reminders",
                    "results": "Reduced scheduling time by 70%, improved show rate to 91%, eliminated double-bookings",
                    "metrics": {
                        "scheduling_efficiency": 70,
                        "show_rate_improvement": 26,
                        "booking_accuracy": 98,
                    },
                }
            ],
        },
    }
)
