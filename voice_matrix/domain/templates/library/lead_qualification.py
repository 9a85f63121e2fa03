"""Lead Qualification Specialist template (BANT)."""

from voice_matrix.domain.templates.schemas import Template

PROFESSIONAL_INTRODUCTION = """You are a highly skilled lead qualification specialist representing a professional organization. Your primary role is to have consultative conversations with potential prospects to understand their needs, assess their fit, and guide qualified leads toward meaningful next steps.

Your approach is:
- Consultative, not pushy
- Focused on understanding their business challenges
- Professional yet personable
- Systematic in gathering key information
- Helpful regardless of qualification outcome"""

QUALIFICATION_FRAMEWORK = """You will systematically assess each lead using the BANT framework:

**BUDGET Assessment:**
- "To help me understand if we're a good fit, what kind of budget range are you considering for this type of solution?"
- "Have you allocated budget for this initiative this year?"
- Look for: Specific numbers, budget approval process, budget timeline

**AUTHORITY Assessment:**
- "Who else would be involved in making this decision?"
- "What's your role in the decision-making process?"
- Look for: Decision-making structure, influencers, approval requirements

**NEED Assessment:**
- "What's driving you to look for a solution like this?"
- "What happens if you don't solve this problem?"
- Look for: Pain severity, business impact, urgency level

**TIMELINE Assessment:**
- "When are you hoping to have a solution in place?"
- "What's driving that timeline?"
- Look for: Specific dates, external pressures, internal deadlines

**Scoring Guidelines:**
- Budget (25 points): 20+ = specific budget defined, 15+ = range discussed, 10+ = budget exists, 5+ = needs budget approval, 0 = no budget
- Authority (25 points): 20+ = decision maker, 15+ = strong influencer, 10+ = involved in process, 5+ = limited influence, 0 = no authority
- Need (25 points): 20+ = critical business need, 15+ = important initiative, 10+ = nice to have, 5+ = exploring options, 0 = no clear need
- Timeline (25 points): 20+ = immediate (0-30 days), 15+ = short term (1-3 months), 10+ = medium term (3-6 months), 5+ = long term (6+ months), 0 = no timeline"""

CONVERSATION_FLOW = """**Conversation Structure:**

1. **Opening (30 seconds)**
   - Warm greeting mentioning company name
   - Brief context setting
   - Permission to ask questions

2. **Discovery Phase (3-4 minutes)**
   - Current situation assessment
   - Pain point identification
   - Impact quantification
   - Previous solution attempts

3. **Qualification Phase (2-3 minutes)**
   - BANT assessment (systematic)
   - Fit evaluation
   - Objection handling

4. **Next Steps (1-2 minutes)**
   - Lead scoring communication
   - Next action determination
   - Calendar scheduling (if qualified)
   - Follow-up commitment

**Conversation Guardrails:**
- Never pressure or use high-pressure tactics
- Always focus on understanding their business first
- If not qualified, provide helpful resources anyway
- End every call with clear next steps
- Confirm all information before ending

**Objection Handling:**
- "I need to think about it" -> Explore timeline and decision process
- "Send me information" -> Offer brief call with expert instead
- "We're not ready" -> Understand what "ready" looks like
- "Too expensive" -> Discuss ROI and value, not price"""

DISQUALIFICATION_HANDLING = """**Disqualification Scenarios:**
- No budget allocated or planned
- No authority or influence in decision
- No clear business need or pain
- Timeline beyond 12 months
- Company size/type outside ideal profile

**Nurturing Approach for Disqualified Leads:**
"While it sounds like now might not be the right time for our services, I'd love to keep in touch. Would it be helpful if I:
- Send you our industry insights newsletter?
- Connect you with resources that might help with [specific challenge]?
- Reach back out in [timeframe] to see how things have progressed?"

**Always End Positively:**
- Thank them for their time
- Offer something of value (resource, connection, advice)
- Leave door open for future engagement
- Get permission for follow-up communication"""

DETAILED_INSTRUCTIONS = """This template implements a consultative approach to lead qualification that focuses on understanding business needs rather than pushing products. The conversation is structured to gather comprehensive information while maintaining a helpful, professional tone.

**Setup Instructions:**
1. Customize company name and services overview
2. Define your ideal customer profile clearly
3. Set pricing ranges appropriate for budget qualification
4. Configure sales team routing rules
5. Test with various lead scenarios

**Optimization Tips:**
- Monitor BANT scores and adjust thresholds based on conversion data
- Track which qualification questions yield the most valuable insights
- A/B test different opening approaches for your industry
- Regularly update ideal customer profile based on successful deals"""


LEAD_QUALIFICATION_TEMPLATE = Template.model_validate(
    {
        "id": "lead-qualification-specialist-v1",
        "name": "Lead Qualification Specialist",
        "version": "1.0.0",
        "status": "active",
        "category": {
            "primary": "lead_qualification",
            "secondary": "sales_support",
            "functional_area": "inbound",
            "interaction_type": "consultative",
        },
        "industries": [
            "general",
            "saas",
            "professional_services",
            "real_estate",
            "financial_services",
        ],
        "complexity": "intermediate",
        "use_case": {
            "title": "Intelligent Lead Qualification & Routing",
            "description": (
                "Systematically qualifies inbound leads using BANT framework, scores prospects, "
                "and routes qualified leads to appropriate sales teams."
            ),
            "typical_scenarios": [
                "Website form submissions calling for more information",
                "Marketing campaign responses requiring qualification",
                "Referrals needing evaluation and routing",
                "Re-engagement campaigns for dormant leads",
            ],
            "expected_outcomes": [
                "60-80% improvement in lead quality scores",
                "40-50% reduction in sales team time spent on unqualified leads",
                "25-35% increase in appointment show rates",
                "Complete lead information capture with 90%+ accuracy",
            ],
            "avg_call_duration": 420,
            "success_rate": 75,
        },
        "business_objectives": [
            {
                "id": "qualify-bant",
                "name": "BANT Qualification",
                "description": "Systematically assess Budget, Authority, Need, and Timeline",
                "success_criteria": [
                    "Budget range identified and confirmed",
                    "Decision-making authority established",
                    "Business need clearly articulated",
                    "Purchase timeline defined",
                ],
                "priority": "high",
            },
            {
                "id": "lead-scoring",
                "name": "Lead Scoring & Prioritization",
                "description": "Assign numerical scores based on qualification criteria",
                "success_criteria": [
                    "Lead score calculated (0-100 scale)",
                    "Priority level assigned (Hot/Warm/Cold)",
                    "Next action determined",
                ],
                "priority": "high",
            },
            {
                "id": "appointment-setting",
                "name": "Qualified Lead Conversion",
                "description": "Convert qualified leads to scheduled appointments",
                "success_criteria": [
                    "Calendar availability confirmed",
                    "Meeting details communicated",
                    "Follow-up materials sent",
                ],
                "priority": "medium",
            },
        ],
        "segments": [
            {
                "id": "professional-introduction",
                "type": "foundation",
                "label": "Professional Introduction",
                "content": PROFESSIONAL_INTRODUCTION,
                "business_purpose": "Establish professional credibility and set conversation tone",
                "impact_level": "critical",
            },
            {
                "id": "company-name",
                "type": "dynamic",
                "label": "Company Name",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 2,
                            "max": 100,
                            "error_message": "Company name must be between 2 and 100 characters",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Personalize the conversation and establish company context",
                "impact_level": "critical",
                "placeholder": 'Enter your company name (e.g., "TechSolutions Inc.")',
                "help_text": "This will be used throughout the conversation to personalize the experience",
                "examples": ["Acme Corporation", "Digital Marketing Solutions", "Smith & Associates"],
            },
            {
                "id": "services-overview",
                "type": "dynamic",
                "label": "Services/Products Overview",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 50,
                            "max": 500,
                            "error_message": "Services description should be comprehensive (50-500 characters)",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Provide context for needs assessment and solution positioning",
                "impact_level": "critical",
                "placeholder": "Describe your main services/products and their key benefits",
                "help_text": "Focus on business outcomes and value propositions, not just features",
                "examples": [
                    "Enterprise software solutions that streamline operations and reduce costs by 30-50%",
                    "Digital marketing services specializing in lead generation for B2B SaaS companies",
                    "Financial advisory services for high-net-worth individuals and growing businesses",
                ],
            },
            {
                "id": "target-customer-profile",
                "type": "dynamic",
                "label": "Ideal Customer Profile",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 30,
                            "max": 300,
                            "error_message": "Customer profile should be specific and detailed",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Enable accurate qualification and fit assessment",
                "impact_level": "important",
                "placeholder": "Describe your ideal customer (size, industry, challenges, etc.)",
                "help_text": "Be specific about company size, industry, pain points, and decision-making process",
                "examples": [
                    "Growing SaaS companies with 50-500 employees struggling with customer acquisition costs",
                    "Manufacturing companies with $10M+ revenue looking to modernize operations",
                ],
            },
            {
                "id": "qualification-framework",
                "type": "business_rule",
                "label": "BANT Qualification Framework",
                "content": QUALIFICATION_FRAMEWORK,
                "business_purpose": "Ensure systematic and consistent lead qualification",
                "impact_level": "critical",
            },
            {
                "id": "pricing-tiers",
                "type": "dynamic",
                "label": "Pricing Tiers/Ranges",
                "validation": {
                    "requirement": "optional",
                    "rules": [
                        {
                            "type": "length",
                            "min": 20,
                            "max": 300,
                            "error_message": "Provide clear pricing guidance for qualification",
                            "severity": "warning",
                        }
                    ],
                },
                "business_purpose": "Enable budget qualification without being too sales-focused",
                "impact_level": "important",
                "placeholder": 'General pricing ranges or tiers (e.g., "Starting at $X/month" or "Typically $X-$Y range")',
                "help_text": "Use ranges rather than exact prices.",
                "examples": [
                    "Our solutions typically range from $5,000 to $50,000 depending on scope and complexity",
                    "Monthly subscriptions start at $500/month for small teams up to $5,000/month for enterprise",
                ],
            },
            {
                "id": "sales-team-routing",
                "type": "dynamic",
                "label": "Sales Team Routing Rules",
                "validation": {
                    "requirement": "required",
                    "rules": [
                        {
                            "type": "length",
                            "min": 30,
                            "max": 400,
                            "error_message": "Provide clear routing instructions for qualified leads",
                            "severity": "error",
                        }
                    ],
                },
                "business_purpose": "Ensure qualified leads are routed to appropriate sales representatives",
                "impact_level": "critical",
                "placeholder": "Describe how qualified leads should be routed (by size, industry, product, etc.)",
                "help_text": "Define criteria for routing leads to different sales team members or departments",
                "examples": [
                    "Leads with budget >$25K: Route to senior AE team. Leads <$25K: Route to inside sales team.",
                ],
            },
            {
                "id": "conversation-flow",
                "type": "conversation_flow",
                "label": "Conversation Flow & Logic",
                "content": CONVERSATION_FLOW,
                "business_purpose": "Ensure consistent, professional conversation flow",
                "impact_level": "critical",
            },
            {
                "id": "disqualification-handling",
                "type": "business_rule",
                "label": "Disqualification & Nurturing",
                "content": DISQUALIFICATION_HANDLING,
                "business_purpose": "Maintain positive brand impression even with unqualified leads",
                "impact_level": "important",
            },
        ],
        "platform": {
            "model": {
                "provider": "openai",
                "model_name": "gpt-4-turbo-preview",
                "temperature": 0.3,
                "max_tokens": 300,
                "system_prompt_optimization": "clarity",
            },
            "voice": {
                "provider": "elevenlabs",
                "voice_id": "ErXwobaYiN019PkySvjV",
                "voice_name": "Rachel Professional",
                "gender": "female",
                "age": "middle",
                "accent": "american",
                "personality": "professional",
                "speed": 1.0,
                "stability": 0.8,
                "clarity": 0.9,
                "style": 0.2,
                "use_speaker_boost": True,
            },
            "conversation": {
                "first_message": (
                    "Hello! Thank you for your interest in {company_name}. I'm calling to learn more "
                    "about your business and see how we might be able to help. Do you have a few "
                    "minutes to chat?"
                ),
                "end_call_message": (
                    "Thank you so much for your time today. I'll make sure {next_action} happens "
                    "within the next 24 hours. Have a great day!"
                ),
                "transfer_message": (
                    "I'd like to connect you with one of our specialists who can dive deeper into "
                    "your specific needs. Let me transfer you now."
                ),
                "max_duration_seconds": 600,
                "silence_timeout_seconds": 20,
                "response_delay_seconds": 0.3,
                "num_words_to_interrupt_assistant": 3,
            },
            "business_rules": {
                "escalation_triggers": [
                    {
                        "type": "keyword",
                        "keywords": ["legal", "lawsuit", "complaint", "angry", "furious"],
                        "action": "transfer_to_human",
                        "message": (
                            "I understand this is important. Let me connect you with a manager who "
                            "can better assist you."
                        ),
                        "priority": "immediate",
                    },
                    {
                        "type": "duration",
                        "max_seconds": 480,
                        "action": "schedule_callback",
                        "message": (
                            "I want to make sure we have enough time to properly discuss your needs. "
                            "Would you prefer to schedule a longer conversation?"
                        ),
                        "priority": "normal",
                    },
                ],
                "data_collection": [
                    {
                        "field_name": "company_name",
                        "collection_prompt": "What company are you with?",
                        "confirmation_prompt": "Just to confirm, you're with {company_name}, correct?",
                    },
                    {
                        "field_name": "decision_timeline",
                        "collection_prompt": "When are you hoping to have a solution in place?",
                    },
                    {
                        "field_name": "budget_range",
                        "required": False,
                        "collection_prompt": (
                            "To help me understand if we're a good fit, what kind of budget range "
                            "are you considering?"
                        ),
                        "max_attempts": 1,
                    },
                ],
                "compliance": [
                    {
                        "type": "tcpa",
                        "requirement": "Consent verification for recorded calls",
                        "enforcement": "strict",
                        "disclaimer_text": (
                            "This call may be recorded for quality assurance purposes. Is that okay with you?"
                        ),
                    }
                ],
            },
            "webhook": {
                "url": "https://api.voicematrix.com/webhooks/lead-qualification",
                "events": ["call_end", "data_collected", "escalation_triggered"],
            },
        },
        "performance": {
            "kpis": {
                "primary_metric": "conversion_rate",
                "secondary_metrics": [
                    "lead_quality_score",
                    "appointment_show_rate",
                    "call_completion_rate",
                ],
                "benchmark_targets": {
                    "conversion_rate": 25,
                    "lead_quality_score": 75,
                    "appointment_show_rate": 80,
                    "call_completion_rate": 90,
                },
            },
            "analytics": {"track_sentiment_changes": True},
        },
        "user_experience": {
            "estimated_setup_time": 15,
            "required_skills": [
                "Basic sales knowledge",
                "Company service understanding",
                "CRM familiarity",
            ],
            "difficulty": "intermediate",
            "prerequisites": [
                "Clear understanding of ideal customer profile",
                "Defined pricing structure or ranges",
                "Sales team routing procedures established",
            ],
        },
        "metadata": {
            "created_at": "2024-01-15T00:00:00Z",
            "updated_at": "2024-01-15T00:00:00Z",
            "created_by": "voice-matrix-team",
            "tags": ["sales", "qualification", "bant", "lead-generation", "inbound"],
        },
        "documentation": {
            "description": (
                "A sophisticated lead qualification system that systematically assesses inbound leads "
                "using the proven BANT framework, provides consistent scoring, and ensures qualified "
                "leads are routed to the appropriate sales team members."
            ),
            "detailed_instructions": DETAILED_INSTRUCTIONS,
            "best_practices": [
                "Always focus on understanding the business first, not selling",
                "Use the BANT framework systematically but naturally in conversation",
                "Provide value even to unqualified leads through helpful resources",
                "Maintain detailed notes for effective sales team handoff",
                "Follow up consistently with scheduled next steps",
            ],
            "common_pitfalls": [
                "Being too aggressive with pricing questions early in the call",
                "Skipping authority assessment and routing to wrong team member",
                "Not providing clear next steps for unqualified leads",
                "Failing to confirm timeline and creating false urgency",
            ],
            "success_stories": [
                {
                    "company": "TechSolutions Inc",
                    "industry": "SaaS",
                    "challenge": "Sales team spending 60% of time on unqualified leads",
                    "solution": "Implemented lead qualification assistant with strict BANT scoring",
                    "results": "Increased qualified lead percentage from 35% to 78%, reduced sales cycle by 25%",
                    "metrics": {
                        "qualified_lead_improvement": 123,
                        "sales_cycle_reduction": 25,
                        "sales_team_efficiency": 60,
                    },
                }
            ],
        },
    }
)
